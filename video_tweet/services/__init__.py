from typing import Protocol, runtime_checkable

from ..schemas import (
    TranscriptSummary,
    TweetGenerationContext,
    TypefullyDraftResponse,
)
from ..types_defs import DraftOptions, TweetGenerationOptions


@runtime_checkable
class TranscriptFetcher(Protocol):
    async def fetch_transcript(self, video_url_or_id: str) -> TranscriptSummary: ...


@runtime_checkable
class TweetContextBuilder(Protocol):
    def generate_tweet_context(
        self,
        transcript: str,
        prompt: str,
        options: TweetGenerationOptions | None = None,
    ) -> TweetGenerationContext: ...


@runtime_checkable
class DraftCreator(Protocol):
    async def create_draft(
        self, content: str, options: DraftOptions | None = None
    ) -> TypefullyDraftResponse: ...
