from __future__ import annotations

from typing import List

import httpx
import pytest
from structlog.testing import capture_logs

from suonora import ConfigurationError, Suonora, SuonoraSettings, resolve_config
from suonora.config import DEFAULT_BASE_URL


def test_missing_api_key_fails_before_any_request(settings: SuonoraSettings) -> None:
    calls: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(ConfigurationError, match="SUONORA_API_KEY"):
        Suonora(settings=settings, transport=httpx.MockTransport(handler))
    assert calls == []


def test_missing_api_key_is_logged(settings: SuonoraSettings) -> None:
    with capture_logs() as logs:
        with pytest.raises(ConfigurationError):
            resolve_config(settings=settings)
    assert logs[-1]["event"] == "suonora_error"
    assert logs[-1]["kind"] == "ConfigurationError"
    assert logs[-1]["log_level"] == "error"


def test_explicit_key_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_API_KEY", "from-env")
    cfg = resolve_config(api_key="explicit", settings=SuonoraSettings(_env_file=None))
    assert cfg.api_key == "explicit"


def test_key_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_API_KEY", '"quoted-key"')
    monkeypatch.delenv("SUONORA_BASE_URL", raising=False)
    cfg = resolve_config(settings=SuonoraSettings(_env_file=None))
    assert cfg.api_key == "quoted-key"
    assert cfg.base_url == DEFAULT_BASE_URL


def test_blank_environment_key_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_API_KEY", "   ")
    with pytest.raises(ConfigurationError):
        resolve_config(settings=SuonoraSettings(_env_file=None))


def test_base_url_and_timeout_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_BASE_URL", "https://env.example.com/v2/")
    monkeypatch.setenv("SUONORA_TIMEOUT_SECONDS", "12.5")
    settings = SuonoraSettings(_env_file=None)

    cfg = resolve_config(api_key="k", settings=settings)
    assert cfg.base_url == "https://env.example.com/v2"
    assert cfg.timeout_seconds == 12.5

    cfg = resolve_config(api_key="k", base_url="http://localhost:9000/v1", timeout_seconds=3, settings=settings)
    assert cfg.base_url == "http://localhost:9000/v1"
    assert cfg.timeout_seconds == 3.0


@pytest.mark.asyncio
async def test_every_request_carries_bearer_token(settings: SuonoraSettings) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/balance"):
            return httpx.Response(200, json={"balance": {}})
        return httpx.Response(200, json={"voices": []})

    client = Suonora(
        api_key="secret",
        base_url="https://api.example.com/v1",
        settings=settings,
        transport=httpx.MockTransport(handler),
    )
    async with client:
        await client.get_balance()
        await client.list_voices()

    assert [str(r.url) for r in seen] == [
        "https://api.example.com/v1/balance",
        "https://api.example.com/v1/voices/list",
    ]
    for r in seen:
        assert r.headers["authorization"] == "Bearer secret"
        assert r.headers["content-type"] == "application/json"


def test_malformed_environment_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_TIMEOUT_SECONDS", "fast")

    with capture_logs() as logs:
        with pytest.raises(ConfigurationError, match="SUONORA_"):
            Suonora(api_key="k", timeout_seconds=5)
    assert logs[-1]["kind"] == "ConfigurationError"


def test_blank_explicit_key_does_not_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUONORA_API_KEY", "from-env")

    with pytest.raises(ConfigurationError):
        resolve_config(api_key="   ", settings=SuonoraSettings(_env_file=None))
