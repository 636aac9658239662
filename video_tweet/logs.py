from __future__ import annotations

# (H) Server lifecycle logs
SERVER_STARTING = "[VideoTweet MCP] Starting MCP server..."
SERVER_CREATED = "[VideoTweet MCP] Server created, starting stdio transport..."
SERVER_INIT_SERVICES = "[VideoTweet MCP] Initializing services..."
SERVER_SERVICES_READY = "[VideoTweet MCP] Services initialized successfully"
SERVER_FATAL = "[VideoTweet MCP] Fatal error: {error}"
SERVER_SHUTDOWN = "[VideoTweet MCP] Shutting down server..."
MISSING_CREDENTIAL = "[VideoTweet MCP] {name} not set; {tool} calls will fail"

# (H) Dispatch logs
TOOL_CALL = "[VideoTweet MCP] Calling tool: {name}"
TOOL_UNKNOWN = "[VideoTweet MCP] Unknown tool requested: {name}"
TOOL_INVALID_ARGS = "[VideoTweet MCP] Rejected arguments for {name}: {error}"
TOOL_FAULT = "[VideoTweet MCP] Tool {name} failed: {error}"
TOOL_UNEXPECTED = "[VideoTweet MCP] Unexpected error in tool {name}: {error}"
TOOL_DONE = "[VideoTweet MCP] Tool {name} completed"

# (H) Collaborator logs
TRANSCRIPT_FETCH = "[MCP] Fetching transcript for video: {video_id}"
TRANSCRIPT_FETCHED = "[MCP] Transcript for {video_id}: {count} segments ({lang})"
TWEET_CONTEXT = "[MCP] Building tweet context: style={style}, format={format}"
DRAFT_CREATE = "[MCP] Creating Typefully draft (threadify={threadify})"
DRAFT_CREATED = "[MCP] Typefully draft created: {draft_id}"
UPSTREAM_ERROR = "[MCP] Upstream {service} request failed: {error}"
