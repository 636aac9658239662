from __future__ import annotations

import sys
from contextlib import redirect_stdout
from dataclasses import dataclass

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constants as cs
from . import exceptions as ex

# (H) stdout carries MCP frames; anything printed while loading .env goes to stderr
with redirect_stdout(sys.stderr):
    load_dotenv()


@dataclass(frozen=True)
class ServiceConfig:
    supadata_api_key: str = ""
    supadata_base_url: str = cs.SUPADATA_BASE_URL
    typefully_api_key: str = ""
    typefully_base_url: str = cs.TYPEFULLY_BASE_URL
    http_timeout: float = cs.DEFAULT_HTTP_TIMEOUT


class AppConfig(BaseSettings):
    """
    (H) All settings are loaded from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    SUPADATA_API_KEY: str = ""
    SUPADATA_BASE_URL: str = cs.SUPADATA_BASE_URL
    TYPEFULLY_API_KEY: str = ""
    TYPEFULLY_BASE_URL: str = cs.TYPEFULLY_BASE_URL
    HTTP_TIMEOUT: float = cs.DEFAULT_HTTP_TIMEOUT

    LOG_LEVEL: str = cs.DEFAULT_LOG_LEVEL
    SERVER_NAME: str = cs.SERVER_NAME
    SERVER_VERSION: str = cs.SERVER_VERSION

    @field_validator("HTTP_TIMEOUT")
    @classmethod
    def _timeout_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(ex.HTTP_TIMEOUT_POSITIVE)
        return value

    def service_config(self) -> ServiceConfig:
        return ServiceConfig(
            supadata_api_key=self.SUPADATA_API_KEY.strip(),
            supadata_base_url=self.SUPADATA_BASE_URL.rstrip("/"),
            typefully_api_key=self.TYPEFULLY_API_KEY.strip(),
            typefully_base_url=self.TYPEFULLY_BASE_URL.rstrip("/"),
            http_timeout=self.HTTP_TIMEOUT,
        )


settings = AppConfig()
