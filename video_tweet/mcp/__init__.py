"""MCP server module for video-to-tweet.

This module provides a Model Context Protocol (MCP) server that exposes
transcript fetching, tweet-context preparation and Typefully draft creation
as tools to MCP clients.
"""

from video_tweet.mcp.server import main as main
