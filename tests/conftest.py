from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from suonora import Suonora, SuonoraSettings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> SuonoraSettings:
    for name in ("SUONORA_API_KEY", "SUONORA_BASE_URL", "SUONORA_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    return SuonoraSettings(_env_file=None)


@pytest.fixture
def sent() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(settings: SuonoraSettings, sent: List[httpx.Request]) -> Callable[[Handler], Suonora]:
    def factory(handler: Handler) -> Suonora:
        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return Suonora(
            api_key="test-key",
            settings=settings,
            transport=httpx.MockTransport(recording),
        )

    return factory
