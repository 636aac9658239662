from __future__ import annotations

import httpx
from loguru import logger

from .. import constants as cs
from .. import exceptions as ex
from .. import logs as ls
from ..config import ServiceConfig
from ..schemas import TypefullyDraftResponse
from ..types_defs import DraftOptions
from ..utils.http_utils import transport_error_message, upstream_error_message


def build_draft_payload(
    content: str, options: DraftOptions | None = None
) -> dict[str, str | bool]:
    options = options or {}
    payload: dict[str, str | bool] = {cs.KEY_CONTENT: content}

    if (threadify := options.get("threadify")) is not None:
        payload[cs.KEY_THREADIFY] = threadify
    if (share := options.get("share")) is not None:
        payload[cs.KEY_SHARE] = share
    if schedule_date := options.get("schedule_date"):
        payload[cs.KEY_SCHEDULE_DATE] = schedule_date
    if (auto_retweet := options.get("auto_retweet_enabled")) is not None:
        payload[cs.KEY_AUTO_RETWEET] = auto_retweet
    if (auto_plug := options.get("auto_plug_enabled")) is not None:
        payload[cs.KEY_AUTO_PLUG] = auto_plug

    return payload


class TypefullyService:
    """Creates drafts through the Typefully v1 API."""

    def __init__(
        self,
        config: ServiceConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = config.typefully_api_key
        self.base_url = config.typefully_base_url
        self.timeout = config.http_timeout
        self._transport = transport

        if not self.api_key:
            logger.warning(
                ls.MISSING_CREDENTIAL.format(
                    name="TYPEFULLY_API_KEY", tool=cs.ToolName.CREATE_TYPEFULLY_DRAFT
                )
            )

    async def create_draft(
        self, content: str, options: DraftOptions | None = None
    ) -> TypefullyDraftResponse:
        if not self.api_key:
            raise ex.MissingCredentialError(ex.TYPEFULLY_NO_KEY)

        payload = build_draft_payload(content, options)
        logger.info(
            ls.DRAFT_CREATE.format(threadify=payload.get(cs.KEY_THREADIFY, False))
        )
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self.base_url}{cs.TYPEFULLY_DRAFTS_PATH}",
                    json=payload,
                    headers={
                        cs.HEADER_TYPEFULLY_API_KEY: cs.TYPEFULLY_AUTH_SCHEME.format(
                            key=self.api_key
                        )
                    },
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = upstream_error_message(e.response, cs.KEY_ERROR)
            logger.error(ls.UPSTREAM_ERROR.format(service="Typefully", error=message))
            raise ex.DraftCreationError(
                ex.TYPEFULLY_API.format(status=e.response.status_code, message=message)
            ) from e
        except httpx.HTTPError as e:
            message = transport_error_message(e)
            logger.error(ls.UPSTREAM_ERROR.format(service="Typefully", error=message))
            raise ex.DraftCreationError(
                ex.TYPEFULLY_API.format(status="no response", message=message)
            ) from e

        try:
            draft = TypefullyDraftResponse.model_validate(response.json())
        except ValueError as e:
            raise ex.DraftCreationError(
                ex.TYPEFULLY_MALFORMED.format(error=type(e).__name__)
            ) from e

        logger.info(ls.DRAFT_CREATED.format(draft_id=draft.id))
        return draft
