from __future__ import annotations

import httpx
from loguru import logger

from .. import constants as cs
from .. import exceptions as ex
from .. import logs as ls
from ..config import ServiceConfig
from ..schemas import TranscriptResponse, TranscriptSummary
from ..utils.http_utils import transport_error_message, upstream_error_message


def extract_video_id(url: str) -> str:
    """Return the 11-character video id from a YouTube URL or a bare id.

    Accepts watch, youtu.be, embed, shorts and live URLs.

    Raises:
        InvalidVideoIdError: If nothing resembling a video id is found.
    """
    candidate = url.strip()
    for pattern in (cs.VIDEO_URL_PATTERN, cs.VIDEO_ID_PATTERN):
        if match := pattern.search(candidate):
            return match.group(1)
    raise ex.InvalidVideoIdError(ex.INVALID_VIDEO_ID)


class YouTubeTranscriptService:
    """Fetches YouTube transcripts through the Supadata transcript API."""

    def __init__(
        self,
        config: ServiceConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = config.supadata_api_key
        self.base_url = config.supadata_base_url
        self.timeout = config.http_timeout
        self._transport = transport

        if not self.api_key:
            logger.warning(
                ls.MISSING_CREDENTIAL.format(
                    name="SUPADATA_API_KEY", tool=cs.ToolName.GET_YOUTUBE_TRANSCRIPT
                )
            )

    async def get_transcript(self, video_id: str) -> TranscriptResponse:
        if not self.api_key:
            raise ex.MissingCredentialError(ex.SUPADATA_NO_KEY)

        logger.info(ls.TRANSCRIPT_FETCH.format(video_id=video_id))
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    f"{self.base_url}{cs.SUPADATA_TRANSCRIPT_PATH}",
                    params={cs.PARAM_VIDEO_ID: video_id},
                    headers={cs.HEADER_SUPADATA_API_KEY: self.api_key},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = upstream_error_message(e.response, cs.KEY_MESSAGE)
            logger.error(ls.UPSTREAM_ERROR.format(service="Supadata", error=message))
            raise ex.TranscriptFetchError(
                ex.TRANSCRIPT_FETCH.format(message=message)
            ) from e
        except httpx.HTTPError as e:
            message = transport_error_message(e)
            logger.error(ls.UPSTREAM_ERROR.format(service="Supadata", error=message))
            raise ex.TranscriptFetchError(
                ex.TRANSCRIPT_FETCH.format(message=message)
            ) from e

        try:
            return TranscriptResponse.model_validate(response.json())
        except ValueError as e:
            raise ex.TranscriptFetchError(
                ex.TRANSCRIPT_MALFORMED.format(error=type(e).__name__)
            ) from e

    def transcript_to_text(self, transcript: TranscriptResponse) -> str:
        joined = " ".join(segment.text for segment in transcript.content)
        return cs.WHITESPACE_PATTERN.sub(" ", joined).strip()

    async def fetch_transcript(self, video_url_or_id: str) -> TranscriptSummary:
        video_id = extract_video_id(video_url_or_id)
        transcript = await self.get_transcript(video_id)
        summary = TranscriptSummary(
            language_code=transcript.lang,
            total_segment_count=len(transcript.content),
            full_text=self.transcript_to_text(transcript),
        )
        logger.info(
            ls.TRANSCRIPT_FETCHED.format(
                video_id=video_id,
                count=summary.total_segment_count,
                lang=summary.language_code,
            )
        )
        return summary
