from collections.abc import Awaitable, Callable
from typing import Any, TypedDict

from ..schemas import ToolOutcome
from ..types_defs import InputSchema

ToolHandler = Callable[[Any], Awaitable[ToolOutcome]]


class ToolSchema(TypedDict):
    name: str
    description: str
    inputSchema: InputSchema
