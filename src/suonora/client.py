from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from suonora import metadata
from suonora.audio import Audio
from suonora.config import ClientConfig, SuonoraSettings, resolve_config
from suonora.transport import create_http_client


class Suonora:
    """
    Async client for the Suonora text-to-speech API.

    The API key comes from ``api_key`` or, failing that, SUONORA_API_KEY
    (environment or .env); without one construction raises ConfigurationError
    before anything touches the network. All calls share one httpx client that
    carries the bearer token.

        async with Suonora() as client:
            mp3 = await client.audio.create(input="Hello", model="legacy-v2.5", voice="axel")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout_seconds: Optional[float] = None,
        settings: Optional[SuonoraSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = resolve_config(
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            settings=settings,
        )
        self._http = create_http_client(self._config, transport=transport)
        self.audio = Audio(self._http)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def list_voices(
        self, *, language: Optional[str] = None, model: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await metadata.list_voices(self._http, language=language, model=model)

    async def get_balance(self) -> Dict[str, Any]:
        return await metadata.get_balance(self._http)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "Suonora":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()
