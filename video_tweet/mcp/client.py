"""MCP client for calling the video-to-tweet tools via the MCP server.

This module provides a simple CLI client that starts the MCP server over
stdio and executes one tool with JSON arguments.
"""

import asyncio
import json
import os
import sys

import typer
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import CallToolResult, TextContent

from video_tweet import constants as cs
from video_tweet.types_defs import ToolArguments

app = typer.Typer()


def server_parameters() -> StdioServerParameters:
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", cs.SERVER_MODULE],
        env=dict(os.environ),
    )


async def call_mcp_tool(tool: str, arguments: ToolArguments) -> CallToolResult:
    """Start the MCP server and call one tool.

    Args:
        tool: Name of the tool to call
        arguments: Tool arguments

    Returns:
        The tool result exactly as the server sent it
    """
    async with stdio_client(server_parameters()) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            return await session.call_tool(tool, arguments)


def extract_text(result: CallToolResult) -> str:
    return "\n".join(
        block.text for block in result.content if isinstance(block, TextContent)
    )


def parse_arguments(raw: str) -> ToolArguments:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(cs.CLIENT_ERR_ARGS_JSON.format(error=e)) from e
    if not isinstance(parsed, dict):
        raise typer.BadParameter(
            cs.CLIENT_ERR_ARGS_TYPE.format(kind=type(parsed).__name__)
        )
    return parsed


@app.command()
def main(
    tool: str = typer.Option(..., "--tool", "-t", help="Name of the tool to call"),
    arguments: str = typer.Option(
        "{}", "--args", "-a", help="Tool arguments as a JSON object"
    ),
) -> None:
    """Call a video-to-tweet tool via the MCP server.

    Example:
        python -m video_tweet.mcp.client -t get_youtube_transcript -a '{"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}'
    """
    parsed = parse_arguments(arguments)

    try:
        result = asyncio.run(call_mcp_tool(tool, parsed))
    except Exception as e:
        print(cs.CLIENT_ERR.format(error=e), file=sys.stderr)
        sys.exit(1)

    text = extract_text(result)
    if result.isError:
        print(text, file=sys.stderr)
        sys.exit(1)
    print(text)


if __name__ == "__main__":
    app()
