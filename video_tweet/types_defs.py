from typing import Literal, NotRequired, TypedDict

TweetStyleName = Literal["conversational", "informative", "engaging", "professional"]
TweetFormatName = Literal["thread", "single"]

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
ToolArguments = dict[str, JSONValue]


class PropertySchema(TypedDict):
    type: str
    description: str
    minimum: NotRequired[int]
    maximum: NotRequired[int]
    minLength: NotRequired[int]
    enum: NotRequired[list[str]]
    default: NotRequired[JSONScalar]


class InputSchema(TypedDict):
    type: Literal["object"]
    properties: dict[str, PropertySchema]
    required: list[str]


class TweetGenerationOptions(TypedDict, total=False):
    max_tweets: int
    style: TweetStyleName
    format: TweetFormatName
    include_emojis: bool
    include_call_to_action: bool


class DraftOptions(TypedDict, total=False):
    threadify: bool
    schedule_date: str
    share: bool
    auto_retweet_enabled: bool
    auto_plug_enabled: bool
