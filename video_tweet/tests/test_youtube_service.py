import dataclasses

import httpx
import pytest

from video_tweet import exceptions as ex
from video_tweet.config import ServiceConfig
from video_tweet.schemas import TranscriptResponse
from video_tweet.services import TranscriptFetcher
from video_tweet.services.youtube import YouTubeTranscriptService, extract_video_id

TRANSCRIPT_BODY = {
    "lang": "en",
    "availableLangs": ["en", "fr"],
    "content": [
        {"text": "hello  ", "duration": 1.5, "offset": 0, "lang": "en"},
        {"text": "\nworld", "duration": 2.0, "offset": 1.5, "lang": "en"},
    ],
}


class TestExtractVideoId:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ?si=tracking",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/shorts/dQw4w9WgXcQ",
            "https://www.youtube.com/live/dQw4w9WgXcQ",
            "dQw4w9WgXcQ",
            "  dQw4w9WgXcQ  ",
        ],
    )
    def test_accepted_shapes(self, url: str) -> None:
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a video",
            "https://example.com/watch?v=",
            "https://vimeo.com/123456",
            "tooShortId",
            "waytoolongvideoid",
        ],
    )
    def test_rejected_shapes(self, url: str) -> None:
        with pytest.raises(ex.InvalidVideoIdError, match=ex.INVALID_VIDEO_ID):
            extract_video_id(url)

    def test_extracted_id_is_stable(self) -> None:
        video_id = extract_video_id("https://youtu.be/abc12345678")

        assert extract_video_id(video_id) == video_id


class TestYouTubeTranscriptService:
    def test_satisfies_protocol(self, service_config: ServiceConfig) -> None:
        assert isinstance(YouTubeTranscriptService(service_config), TranscriptFetcher)

    def test_transcript_to_text_collapses_whitespace(
        self, service_config: ServiceConfig
    ) -> None:
        service = YouTubeTranscriptService(service_config)
        transcript = TranscriptResponse.model_validate(TRANSCRIPT_BODY)

        assert service.transcript_to_text(transcript) == "hello world"

    @pytest.mark.anyio
    async def test_get_transcript_sends_key_and_video_id(
        self, service_config: ServiceConfig
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=TRANSCRIPT_BODY)

        service = YouTubeTranscriptService(
            service_config, transport=httpx.MockTransport(handler)
        )

        transcript = await service.get_transcript("dQw4w9WgXcQ")

        assert transcript.lang == "en"
        assert transcript.available_langs == ["en", "fr"]
        assert len(transcript.content) == 2
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/youtube/transcript"
        assert request.url.params["videoId"] == "dQw4w9WgXcQ"
        assert request.headers["x-api-key"] == "supadata-test-key"

    @pytest.mark.anyio
    async def test_fetch_transcript_summarizes(
        self, service_config: ServiceConfig
    ) -> None:
        service = YouTubeTranscriptService(
            service_config,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json=TRANSCRIPT_BODY)
            ),
        )

        summary = await service.fetch_transcript("https://youtu.be/dQw4w9WgXcQ")

        assert summary.language_code == "en"
        assert summary.total_segment_count == 2
        assert summary.full_text == "hello world"

    @pytest.mark.anyio
    async def test_upstream_error_message_is_used(
        self, service_config: ServiceConfig
    ) -> None:
        service = YouTubeTranscriptService(
            service_config,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    404, json={"message": "Transcript unavailable"}
                )
            ),
        )

        with pytest.raises(
            ex.TranscriptFetchError,
            match="Failed to fetch transcript: Transcript unavailable",
        ):
            await service.get_transcript("dQw4w9WgXcQ")

    @pytest.mark.anyio
    async def test_status_fallback_without_body(
        self, service_config: ServiceConfig
    ) -> None:
        service = YouTubeTranscriptService(
            service_config,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(502, text="Bad Gateway")
            ),
        )

        with pytest.raises(
            ex.TranscriptFetchError, match="Request failed with status code 502"
        ):
            await service.get_transcript("dQw4w9WgXcQ")

    @pytest.mark.anyio
    async def test_transport_error_is_wrapped(
        self, service_config: ServiceConfig
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = YouTubeTranscriptService(
            service_config, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(ex.TranscriptFetchError, match="connection refused"):
            await service.get_transcript("dQw4w9WgXcQ")

    @pytest.mark.anyio
    async def test_malformed_body(self, service_config: ServiceConfig) -> None:
        service = YouTubeTranscriptService(
            service_config,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json={"unexpected": True})
            ),
        )

        with pytest.raises(ex.TranscriptFetchError, match="unexpected response"):
            await service.get_transcript("dQw4w9WgXcQ")

    @pytest.mark.anyio
    async def test_missing_key_fails_before_request(
        self, service_config: ServiceConfig
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        service = YouTubeTranscriptService(
            dataclasses.replace(service_config, supadata_api_key=""),
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(ex.MissingCredentialError, match="SUPADATA_API_KEY"):
            await service.fetch_transcript("dQw4w9WgXcQ")
