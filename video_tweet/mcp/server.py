import asyncio
import sys
from contextlib import redirect_stdout

from loguru import logger
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, ServerResult, Tool

from video_tweet import constants as cs
from video_tweet import logs as ls
from video_tweet.config import ServiceConfig, settings
from video_tweet.mcp.dispatcher import ToolDispatcher
from video_tweet.mcp.tools import create_mcp_tools_registry
from video_tweet.services.tweet_generation import TweetGenerationService
from video_tweet.services.typefully import TypefullyService
from video_tweet.services.youtube import YouTubeTranscriptService


def setup_logging() -> None:
    """Configure logging to stderr for MCP stdio transport."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        format=cs.LOG_FORMAT,
        diagnose=False,
    )


def build_dispatcher(config: ServiceConfig | None = None) -> ToolDispatcher:
    """Create the collaborators and wrap them in a dispatcher.

    stdout is redirected to stderr while collaborators initialise so nothing
    they print can corrupt the protocol stream.
    """
    config = config or settings.service_config()
    logger.info(ls.SERVER_INIT_SERVICES)

    with redirect_stdout(sys.stderr):
        registry = create_mcp_tools_registry(
            transcripts=YouTubeTranscriptService(config),
            tweet_context=TweetGenerationService(),
            drafts=TypefullyService(config),
        )

    logger.info(ls.SERVER_SERVICES_READY)
    return ToolDispatcher(registry)


def create_server(dispatcher: ToolDispatcher | None = None) -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured MCP server instance
    """
    dispatcher = dispatcher or build_dispatcher()
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    # (H) registered directly so the dispatcher's CallToolResult, including
    # (H) isError, reaches the client without being re-wrapped by the SDK
    async def call_tool(request: CallToolRequest) -> ServerResult:
        result = await dispatcher.call_tool(
            request.params.name, request.params.arguments
        )
        return ServerResult(result)

    server.request_handlers[CallToolRequest] = call_tool
    return server


async def main() -> None:
    """Main entry point for the MCP server."""
    setup_logging()
    logger.info(ls.SERVER_STARTING)

    server = create_server()
    logger.info(ls.SERVER_CREATED)

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    except Exception as e:
        logger.error(ls.SERVER_FATAL.format(error=e))
        raise
    finally:
        logger.info(ls.SERVER_SHUTDOWN)


if __name__ == "__main__":
    asyncio.run(main())
