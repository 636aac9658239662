import re
from enum import StrEnum


class ToolName(StrEnum):
    GET_YOUTUBE_TRANSCRIPT = "get_youtube_transcript"
    GENERATE_TWEETS_FROM_TRANSCRIPT = "generate_tweets_from_transcript"
    CREATE_TYPEFULLY_DRAFT = "create_typefully_draft"


class TweetStyle(StrEnum):
    CONVERSATIONAL = "conversational"
    INFORMATIVE = "informative"
    ENGAGING = "engaging"
    PROFESSIONAL = "professional"


class TweetFormat(StrEnum):
    THREAD = "thread"
    SINGLE = "single"


class Color(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


# (H) Server identity
SERVER_NAME = "youtube-video-to-tweet"
SERVER_VERSION = "1.0.0"
SERVER_MODULE = "video_tweet.mcp.server"

# (H) Upstream endpoints
SUPADATA_BASE_URL = "https://api.supadata.ai/v1/youtube"
SUPADATA_TRANSCRIPT_PATH = "/transcript"
TYPEFULLY_BASE_URL = "https://api.typefully.com/v1"
TYPEFULLY_DRAFTS_PATH = "/drafts/"

# (H) HTTP
HEADER_SUPADATA_API_KEY = "x-api-key"
HEADER_TYPEFULLY_API_KEY = "X-API-KEY"
TYPEFULLY_AUTH_SCHEME = "Bearer {key}"
PARAM_VIDEO_ID = "videoId"
DEFAULT_HTTP_TIMEOUT = 30.0
HTTP_STATUS_FALLBACK = "Request failed with status code {status}"

# (H) Typefully payload keys
KEY_CONTENT = "content"
KEY_THREADIFY = "threadify"
KEY_SHARE = "share"
KEY_SCHEDULE_DATE = "schedule-date"
KEY_AUTO_RETWEET = "auto_retweet_enabled"
KEY_AUTO_PLUG = "auto_plug_enabled"

# (H) Upstream error body keys
KEY_ERROR = "error"
KEY_MESSAGE = "message"

# (H) Video id extraction
VIDEO_URL_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?(?:[^#]*&)?v=|youtu\.be/|youtube\.com/embed/"
    r"|youtube\.com/shorts/|youtube\.com/live/)([^&\n?#/]+)"
)
VIDEO_ID_PATTERN = re.compile(r"^([a-zA-Z0-9_-]{11})$")

# (H) Tweet generation defaults
DEFAULT_MAX_TWEETS = 5
MIN_TWEETS = 1
MAX_TWEETS = 10
TWEET_CHAR_LIMIT = 280
DEFAULT_TWEET_STYLE = TweetStyle.ENGAGING
DEFAULT_TWEET_FORMAT = TweetFormat.THREAD

WHITESPACE_PATTERN = re.compile(r"\s+")
TRANSCRIPT_DISALLOWED_CHARS = re.compile(r"[^\w\s.,!?-]")
CONTROL_CHARS_PATTERN = re.compile(r"[\r\n\t]")

# (H) Logging
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | <level>{message}</level>"
)
DEFAULT_LOG_LEVEL = "INFO"

# (H) Display
DRAFT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
JSON_INDENT = 2

# (H) Client messages
CLIENT_ERR = "Error: {error}"
CLIENT_ERR_ARGS_JSON = "Error: --args must be a JSON object: {error}"
CLIENT_ERR_ARGS_TYPE = "Error: --args must be a JSON object, got {kind}"

# (H) CLI messages
CLI_ERR_MCP_SERVER = "MCP Server Error: {error}"
CLI_ERR_CONFIG = "Configuration Error: {error}"
CLI_MSG_MCP_TERMINATED = "\nMCP server terminated by user."
CLI_MSG_HINT_ENV = (
    "\nHint: Check SUPADATA_API_KEY, TYPEFULLY_API_KEY and HTTP_TIMEOUT in your .env file."
)


class StyleModifier(StrEnum):
    BOLD = "bold"
    NONE = ""
