from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from suonora.errors import ConfigurationError, raise_logged

DEFAULT_BASE_URL = "https://api.suonora.com/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _strip_quotes(s: str) -> str:
    s = (s or "").strip()
    if len(s) >= 2 and ((s[0] == s[-1]) and s[0] in ("'", '"')):
        s = s[1:-1].strip()
    return s


class SuonoraSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = Field(default=None, alias="SUONORA_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="SUONORA_BASE_URL")
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="SUONORA_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="SUONORA_LOG_LEVEL")

    @field_validator("api_key", mode="before")
    @classmethod
    def _normalize_api_key(cls, v: object) -> Optional[str]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        if not s:
            return None
        return s

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, v: object) -> str:
        s = _strip_quotes(str(v or ""))
        return s or DEFAULT_BASE_URL


def load_settings() -> SuonoraSettings:
    try:
        return SuonoraSettings()
    except pydantic.ValidationError as e:
        raise_logged(
            ConfigurationError("Invalid SUONORA_* settings: %s" % e),
            operation="init",
            cause=e,
        )


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def resolve_config(
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    settings: Optional[SuonoraSettings] = None,
) -> ClientConfig:
    """
    Explicit arguments win over the settings snapshot; the snapshot is read from
    the environment (and .env) once, here, when the caller does not pass one.
    A blank explicit ``api_key`` is rejected rather than replaced by SUONORA_API_KEY.
    """
    if settings is None:
        settings = load_settings()

    if api_key is not None:
        key = _strip_quotes(api_key)
    else:
        key = settings.api_key or ""
    if not key:
        raise_logged(
            ConfigurationError(
                "API key is required. Provide it during initialization or set SUONORA_API_KEY."
            ),
            operation="init",
        )

    url = _strip_quotes(base_url) if base_url else ""
    url = (url or settings.base_url or DEFAULT_BASE_URL).rstrip("/")

    timeout = settings.timeout_seconds if timeout_seconds is None else timeout_seconds

    return ClientConfig(api_key=key, base_url=url, timeout_seconds=float(timeout))
