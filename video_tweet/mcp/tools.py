from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from loguru import logger
from pydantic import BaseModel

from .. import constants as cs
from .. import logs as ls
from ..exceptions import VideoTweetError
from ..schemas import (
    CreateDraftArguments,
    GenerateTweetsArguments,
    ToolFault,
    ToolOutcome,
    ToolSuccess,
    TranscriptArguments,
    TranscriptSummary,
)
from ..services import DraftCreator, TranscriptFetcher, TweetContextBuilder
from ..services.youtube import extract_video_id
from ..types_defs import DraftOptions, InputSchema, TweetGenerationOptions
from . import tool_descriptions as td
from .types_defs import ToolHandler, ToolSchema


@dataclass(frozen=True)
class ToolMetadata:
    name: str
    description: str
    input_schema: InputSchema
    arguments_model: type[BaseModel]
    handler: ToolHandler


def _format_created(created_at: str) -> str:
    try:
        return datetime.fromisoformat(created_at).strftime(cs.DRAFT_TIME_FORMAT)
    except ValueError:
        return created_at


class MCPToolsRegistry:
    """Static catalog of the three tools and the handlers bound to them.

    Handlers receive arguments already validated against ``arguments_model``
    and report collaborator failures as ``ToolFault`` instead of raising.
    """

    def __init__(
        self,
        transcripts: TranscriptFetcher,
        tweet_context: TweetContextBuilder,
        drafts: DraftCreator,
    ) -> None:
        self.transcripts = transcripts
        self.tweet_context = tweet_context
        self.drafts = drafts

        tools = (
            ToolMetadata(
                name=cs.ToolName.GET_YOUTUBE_TRANSCRIPT.value,
                description=td.GET_YOUTUBE_TRANSCRIPT,
                input_schema={
                    "type": "object",
                    "properties": {
                        "videoUrl": {
                            "type": "string",
                            "description": td.PARAM_VIDEO_URL,
                            "minLength": 1,
                        },
                    },
                    "required": ["videoUrl"],
                },
                arguments_model=TranscriptArguments,
                handler=self.get_youtube_transcript,
            ),
            ToolMetadata(
                name=cs.ToolName.GENERATE_TWEETS_FROM_TRANSCRIPT.value,
                description=td.GENERATE_TWEETS_FROM_TRANSCRIPT,
                input_schema={
                    "type": "object",
                    "properties": {
                        "transcript": {
                            "type": "string",
                            "description": td.PARAM_TRANSCRIPT,
                            "minLength": 1,
                        },
                        "prompt": {
                            "type": "string",
                            "description": td.PARAM_PROMPT,
                            "minLength": 1,
                        },
                        "maxTweets": {
                            "type": "integer",
                            "description": td.PARAM_MAX_TWEETS,
                            "minimum": cs.MIN_TWEETS,
                            "maximum": cs.MAX_TWEETS,
                        },
                        "style": {
                            "type": "string",
                            "enum": [style.value for style in cs.TweetStyle],
                            "description": td.PARAM_STYLE,
                        },
                        "format": {
                            "type": "string",
                            "enum": [fmt.value for fmt in cs.TweetFormat],
                            "description": td.PARAM_FORMAT,
                        },
                    },
                    "required": ["transcript", "prompt"],
                },
                arguments_model=GenerateTweetsArguments,
                handler=self.generate_tweets_from_transcript,
            ),
            ToolMetadata(
                name=cs.ToolName.CREATE_TYPEFULLY_DRAFT.value,
                description=td.CREATE_TYPEFULLY_DRAFT,
                input_schema={
                    "type": "object",
                    "properties": {
                        "content": {
                            "type": "string",
                            "description": td.PARAM_CONTENT,
                        },
                        "threadify": {
                            "type": "boolean",
                            "description": td.PARAM_THREADIFY,
                            "default": False,
                        },
                        "scheduleDate": {
                            "type": "string",
                            "description": td.PARAM_SCHEDULE_DATE,
                        },
                        "share": {
                            "type": "boolean",
                            "description": td.PARAM_SHARE,
                            "default": False,
                        },
                    },
                    "required": ["content"],
                },
                arguments_model=CreateDraftArguments,
                handler=self.create_typefully_draft,
            ),
        )
        self._tools: Mapping[str, ToolMetadata] = MappingProxyType(
            {tool.name: tool for tool in tools}
        )

    async def get_youtube_transcript(
        self, arguments: TranscriptArguments
    ) -> ToolOutcome:
        try:
            video_id = extract_video_id(arguments.video_url)
            summary = TranscriptSummary.model_validate(
                await self.transcripts.fetch_transcript(video_id)
            )
        except VideoTweetError as e:
            logger.error(
                ls.TOOL_FAULT.format(name=cs.ToolName.GET_YOUTUBE_TRANSCRIPT, error=e)
            )
            return ToolFault(str(e))

        return ToolSuccess(
            td.TRANSCRIPT_FETCHED.format(
                video_id=video_id,
                language=summary.language_code,
                segments=summary.total_segment_count,
                text=summary.full_text,
            )
        )

    async def generate_tweets_from_transcript(
        self, arguments: GenerateTweetsArguments
    ) -> ToolOutcome:
        options: TweetGenerationOptions = {
            "include_call_to_action": True,
            "include_emojis": True,
        }
        if arguments.max_tweets is not None:
            options["max_tweets"] = arguments.max_tweets
        if arguments.style is not None:
            options["style"] = arguments.style
        if arguments.format is not None:
            options["format"] = arguments.format

        context = self.tweet_context.generate_tweet_context(
            arguments.transcript, arguments.prompt, options
        )
        format_description = (
            td.FORMAT_SINGLE
            if context.format == cs.TweetFormat.SINGLE
            else td.FORMAT_THREAD
        )
        return ToolSuccess(
            td.TWEET_CONTEXT_PREPARED.format(
                prompt=arguments.prompt,
                style=context.style,
                format_description=format_description,
                format_description_lower=format_description.lower(),
                max_tweets=context.max_tweets,
                system_prompt=context.system_prompt,
                instructions=context.instructions,
            )
        )

    async def create_typefully_draft(
        self, arguments: CreateDraftArguments
    ) -> ToolOutcome:
        options: DraftOptions = {}
        if arguments.threadify is not None:
            options["threadify"] = arguments.threadify
        if arguments.schedule_date is not None:
            options["schedule_date"] = arguments.schedule_date
        if arguments.share is not None:
            options["share"] = arguments.share

        try:
            draft = await self.drafts.create_draft(arguments.content, options)
        except VideoTweetError as e:
            logger.error(
                ls.TOOL_FAULT.format(name=cs.ToolName.CREATE_TYPEFULLY_DRAFT, error=e)
            )
            return ToolFault(str(e))

        return ToolSuccess(
            td.DRAFT_CREATED.format(
                draft_id=draft.id,
                created=_format_created(draft.created_at),
                status=draft.status,
                threadified=td.YES if arguments.threadify else td.NO,
                share_url=draft.share_url or td.NOT_SHARED,
            )
        )

    def list_tools(self) -> list[ToolMetadata]:
        return list(self._tools.values())

    def find(self, name: str) -> ToolMetadata | None:
        return self._tools.get(name)

    def get_tool_schemas(self) -> list[ToolSchema]:
        return [
            {
                "name": metadata.name,
                "description": metadata.description,
                "inputSchema": metadata.input_schema,
            }
            for metadata in self._tools.values()
        ]


def create_mcp_tools_registry(
    transcripts: TranscriptFetcher,
    tweet_context: TweetContextBuilder,
    drafts: DraftCreator,
) -> MCPToolsRegistry:
    return MCPToolsRegistry(
        transcripts=transcripts,
        tweet_context=tweet_context,
        drafts=drafts,
    )
