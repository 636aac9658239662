import asyncio

import typer
from rich.console import Console

from . import constants as cs

app = typer.Typer(
    name="video-tweet",
    help="An MCP server that turns YouTube videos into tweet drafts: fetch a "
    "transcript, prepare tweet-writing context for the calling LLM, and save "
    "the result as a Typefully draft.",
    no_args_is_help=True,
    add_completion=False,
)

# (H) stdout belongs to the MCP protocol while the server runs
err_console = Console(stderr=True)
out_console = Console()


def style(
    text: str, color: cs.Color, modifier: cs.StyleModifier = cs.StyleModifier.BOLD
) -> str:
    if modifier == cs.StyleModifier.NONE:
        return f"[{color}]{text}[/{color}]"
    return f"[{modifier} {color}]{text}[/{modifier} {color}]"


@app.command(name="mcp-server", help="Start the MCP server on stdio")
def mcp_server() -> None:
    try:
        from video_tweet.mcp import main as mcp_main

        asyncio.run(mcp_main())
    except KeyboardInterrupt:
        err_console.print(style(cs.CLI_MSG_MCP_TERMINATED, cs.Color.RED))
    except ValueError as e:
        err_console.print(style(cs.CLI_ERR_CONFIG.format(error=e), cs.Color.RED))
        err_console.print(style(cs.CLI_MSG_HINT_ENV, cs.Color.YELLOW))
        raise typer.Exit(1) from e
    except Exception as e:
        err_console.print(style(cs.CLI_ERR_MCP_SERVER.format(error=e), cs.Color.RED))
        raise typer.Exit(1) from e


@app.command(name="list-tools", help="Print the tool catalog as JSON")
def list_tools_command() -> None:
    from video_tweet.mcp.server import build_dispatcher

    tools = build_dispatcher().list_tools()
    out_console.print_json(
        data=[tool.model_dump(by_alias=True, exclude_none=True) for tool in tools],
        indent=cs.JSON_INDENT,
    )


if __name__ == "__main__":
    app()
