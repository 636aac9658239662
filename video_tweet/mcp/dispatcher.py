"""Routing, argument validation and error normalisation for MCP tool calls.

Every call resolves to a ``CallToolResult``. Unknown tools, invalid arguments
and handler failures all come back with ``isError=True`` and a single text
block, so callers have one decoding path and the server process is never
taken down by a tool.
"""

from collections.abc import Mapping

from loguru import logger
from mcp.types import CallToolResult, TextContent, Tool
from pydantic import ValidationError

from .. import constants as cs
from .. import logs as ls
from .. import tool_errors as te
from ..schemas import ToolFault, ToolOutcome, ToolSuccess
from .tools import MCPToolsRegistry, ToolMetadata


def sanitize_error_message(message: str) -> str:
    return cs.CONTROL_CHARS_PATTERN.sub(" ", message).strip()


def build_result(outcome: ToolOutcome) -> CallToolResult:
    match outcome:
        case ToolSuccess(text=text):
            return CallToolResult(
                content=[TextContent(type="text", text=text)], isError=False
            )
        case ToolFault(message=message):
            text = te.ERROR_WRAPPER.format(
                message=sanitize_error_message(message) or te.UNKNOWN_ERROR
            )
            return CallToolResult(
                content=[TextContent(type="text", text=text)], isError=True
            )


def describe_validation_error(tool: str, error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or te.ROOT_FIELD
    return te.INVALID_ARGUMENTS.format(tool=tool, field=field, reason=first["msg"])


class ToolDispatcher:
    def __init__(self, registry: MCPToolsRegistry) -> None:
        self.registry = registry

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=metadata.name,
                description=metadata.description,
                inputSchema=dict(metadata.input_schema),
            )
            for metadata in self.registry.list_tools()
        ]

    async def call_tool(
        self, name: str, arguments: Mapping[str, object] | None
    ) -> CallToolResult:
        logger.info(ls.TOOL_CALL.format(name=name))

        metadata = self.registry.find(name)
        if metadata is None:
            logger.error(ls.TOOL_UNKNOWN.format(name=name))
            return build_result(ToolFault(te.UNKNOWN_TOOL.format(name=name)))

        return build_result(await self._invoke(metadata, arguments))

    async def _invoke(
        self, metadata: ToolMetadata, arguments: Mapping[str, object] | None
    ) -> ToolOutcome:
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return ToolFault(te.ARGUMENTS_NOT_OBJECT.format(tool=metadata.name))

        try:
            validated = metadata.arguments_model.model_validate(dict(arguments))
        except ValidationError as e:
            message = describe_validation_error(metadata.name, e)
            logger.warning(ls.TOOL_INVALID_ARGS.format(name=metadata.name, error=message))
            return ToolFault(message)

        try:
            outcome = await metadata.handler(validated)
        except Exception as e:
            # (H) last line of defence: nothing raised by a handler leaves this call
            logger.opt(exception=e).error(
                ls.TOOL_UNEXPECTED.format(name=metadata.name, error=e)
            )
            return ToolFault(str(e))

        if isinstance(outcome, ToolSuccess):
            logger.info(ls.TOOL_DONE.format(name=metadata.name))
        return outcome
