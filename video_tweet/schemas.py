from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import constants as cs
from .types_defs import TweetFormatName, TweetStyleName

# (H) Tool arguments. Strict mode: no coercion of "5" -> 5 or 1 -> True.
# (H) Unknown fields are ignored so existing callers keep working.
_ARGUMENT_CONFIG = ConfigDict(strict=True, extra="ignore", frozen=True)


class TranscriptArguments(BaseModel):
    model_config = _ARGUMENT_CONFIG

    video_url: str = Field(alias="videoUrl", min_length=1)


class GenerateTweetsArguments(BaseModel):
    model_config = _ARGUMENT_CONFIG

    transcript: str = Field(min_length=1)
    prompt: str = Field(min_length=1)
    max_tweets: int | None = Field(
        default=None, alias="maxTweets", ge=cs.MIN_TWEETS, le=cs.MAX_TWEETS
    )
    style: TweetStyleName | None = None
    format: TweetFormatName | None = None

    @field_validator("max_tweets", mode="before")
    @classmethod
    def _integral_float(cls, value: object) -> object:
        # (H) JSON has one number type; 5.0 is a valid integer there
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class CreateDraftArguments(BaseModel):
    model_config = _ARGUMENT_CONFIG

    content: str
    threadify: bool | None = None
    schedule_date: str | None = Field(default=None, alias="scheduleDate")
    share: bool | None = None


# (H) Upstream responses
class TranscriptSegment(BaseModel):
    text: str
    duration: float | None = None
    offset: float | None = None
    lang: str | None = None


class TranscriptResponse(BaseModel):
    lang: str
    available_langs: list[str] = Field(default_factory=list, alias="availableLangs")
    content: list[TranscriptSegment] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _drop_null_segments(cls, v: object) -> object:
        if isinstance(v, list):
            return [segment for segment in v if segment is not None]
        return v


class TypefullyDraftResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    status: str
    created_at: str
    content: str | None = None
    scheduled_at: str | None = None
    share_url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: object) -> object:
        if isinstance(v, int):
            return str(v)
        return v


# (H) Collaborator results
class TranscriptSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    language_code: str = Field(alias="languageCode")
    total_segment_count: int = Field(alias="totalSegmentCount")
    full_text: str = Field(alias="fullText")


class TweetGenerationContext(BaseModel):
    transcript: str
    prompt: str
    format: TweetFormatName
    style: TweetStyleName
    max_tweets: int
    include_emojis: bool
    include_call_to_action: bool
    system_prompt: str
    instructions: str


# (H) Handler outcomes, mapped to the envelope in one place by the dispatcher
@dataclass(frozen=True)
class ToolSuccess:
    text: str


@dataclass(frozen=True)
class ToolFault:
    message: str


ToolOutcome = ToolSuccess | ToolFault
