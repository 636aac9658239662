# (H) Credential errors
SUPADATA_NO_KEY = (
    "SUPADATA_API_KEY environment variable is required to fetch transcripts."
)
TYPEFULLY_NO_KEY = "TYPEFULLY_API_KEY environment variable is required"

# (H) Transcript errors
INVALID_VIDEO_ID = "Invalid YouTube URL or video ID"
TRANSCRIPT_FETCH = "Failed to fetch transcript: {message}"
TRANSCRIPT_MALFORMED = "Failed to fetch transcript: unexpected response ({error})"

# (H) Draft errors
TYPEFULLY_API = "Typefully API error: {status} - {message}"
TYPEFULLY_MALFORMED = "Typefully API error: unexpected response ({error})"

# (H) Configuration errors
HTTP_TIMEOUT_POSITIVE = "HTTP_TIMEOUT must be a positive number"


# (H) Exception classes
class VideoTweetError(Exception):
    pass


class MissingCredentialError(VideoTweetError):
    pass


class InvalidVideoIdError(VideoTweetError):
    pass


class TranscriptFetchError(VideoTweetError):
    pass


class DraftCreationError(VideoTweetError):
    pass
