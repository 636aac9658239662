from __future__ import annotations

import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from video_tweet.config import ServiceConfig  # noqa: E402
from video_tweet.mcp.dispatcher import ToolDispatcher  # noqa: E402
from video_tweet.mcp.tools import MCPToolsRegistry  # noqa: E402
from video_tweet.schemas import TranscriptSummary, TypefullyDraftResponse  # noqa: E402
from video_tweet.services.tweet_generation import TweetGenerationService  # noqa: E402


@pytest.fixture(params=["asyncio"])
def anyio_backend(request: pytest.FixtureRequest) -> str:
    """Configure anyio to only use asyncio backend."""
    return str(request.param)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(
        supadata_api_key="supadata-test-key",
        supadata_base_url="https://supadata.test/v1/youtube",
        typefully_api_key="typefully-test-key",
        typefully_base_url="https://typefully.test/v1",
        http_timeout=5.0,
    )


@pytest.fixture
def mock_transcripts() -> MagicMock:
    transcripts = MagicMock()
    transcripts.fetch_transcript = AsyncMock(
        return_value=TranscriptSummary(
            language_code="en", total_segment_count=12, full_text="hello world"
        )
    )
    return transcripts


@pytest.fixture
def mock_drafts() -> MagicMock:
    drafts = MagicMock()
    drafts.create_draft = AsyncMock(
        return_value=TypefullyDraftResponse(
            id="draft-42",
            status="draft",
            created_at="2024-05-01T10:30:00+00:00",
            share_url="https://typefully.com/t/abc",
        )
    )
    return drafts


@pytest.fixture
def registry(mock_transcripts: MagicMock, mock_drafts: MagicMock) -> MCPToolsRegistry:
    return MCPToolsRegistry(
        transcripts=mock_transcripts,
        tweet_context=TweetGenerationService(),
        drafts=mock_drafts,
    )


@pytest.fixture
def dispatcher(registry: MCPToolsRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry)
