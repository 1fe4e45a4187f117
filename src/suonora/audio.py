from __future__ import annotations

from typing import Any, AsyncIterator, Optional

import httpx

from suonora.core.logging import get_logger
from suonora.speech import build_request
from suonora.transport import send

AUDIO_HEADERS = {"Accept": "audio/mpeg"}


class AudioStream:
    """
    Live audio body from the streaming endpoint.

    Bytes arrive as the server produces them. Iterate it (or call
    ``aiter_bytes``) to drain it, and close it when done; ``async with`` does
    the closing for you. Errors after the headers arrived come out of the
    iteration as httpx exceptions.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def content_type(self) -> str:
        return self._response.headers.get("content-type", "audio/mpeg")

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    def aiter_bytes(self, chunk_size: Optional[int] = None) -> AsyncIterator[bytes]:
        return self._response.aiter_bytes(chunk_size)

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.aiter_bytes()

    async def aread(self) -> bytes:
        try:
            return await self._response.aread()
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        await self._response.aclose()

    async def __aenter__(self) -> "AudioStream":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()


class Audio:
    """Speech synthesis, exposed on the client as ``client.audio``."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http
        self._log = get_logger(component="suonora.audio")

    async def create(
        self,
        *,
        input: Any = None,
        model: Any = None,
        voice: Any = None,
        pitch: Optional[str] = None,
        style: Optional[str] = None,
        style_degree: Optional[float] = None,
        lang: Optional[str] = None,
    ) -> bytes:
        """
        Synthesize ``input`` and return the whole MP3 body once it has arrived.
        Suitable for short texts or when playback needs the complete file.
        """
        req = build_request(
            input=input,
            model=model,
            voice=voice,
            pitch=pitch,
            style=style,
            style_degree=style_degree,
            lang=lang,
            operation="audio.create",
        )
        resp = await send(
            self._http,
            "POST",
            "/audio/speech",
            operation="audio.create",
            failure="Failed to generate speech",
            json=req.to_payload(),
            headers=AUDIO_HEADERS,
        )
        return resp.content

    async def stream(
        self,
        *,
        input: Any = None,
        model: Any = None,
        voice: Any = None,
        pitch: Optional[str] = None,
        style: Optional[str] = None,
        style_degree: Optional[float] = None,
        lang: Optional[str] = None,
    ) -> AudioStream:
        """
        Start synthesis on the streaming endpoint and return as soon as the
        response headers are in. The caller drains and closes the stream.
        """
        req = build_request(
            input=input,
            model=model,
            voice=voice,
            pitch=pitch,
            style=style,
            style_degree=style_degree,
            lang=lang,
            operation="audio.stream",
        )
        resp = await send(
            self._http,
            "POST",
            "/audio/stream",
            operation="audio.stream",
            failure="Failed to stream speech",
            stream=True,
            json=req.to_payload(),
            headers=AUDIO_HEADERS,
        )
        self._log.debug("stream_opened", status=resp.status_code)
        return AudioStream(resp)
