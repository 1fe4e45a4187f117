from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from suonora.core.logging import get_logger
from suonora.errors import FormatError, raise_logged
from suonora.transport import send


async def list_voices(
    http: httpx.AsyncClient,
    *,
    language: Optional[str] = None,
    model: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    GET /voices/list and unwrap ``{"voices": [...]}``.

    ``language`` and ``model`` are accepted but not sent: the endpoint is always
    called unfiltered, matching the behaviour existing callers rely on.
    """
    if language is not None or model is not None:
        get_logger(component="suonora").warning(
            "voice_filters_ignored", operation="list_voices", language=language, model=model
        )

    data = await _get_json(http, "/voices/list", operation="list_voices", failure="Failed to list voices")
    voices = data.get("voices") if isinstance(data, dict) else None
    if not isinstance(voices, list):
        raise_logged(
            FormatError("Failed to list voices: Unexpected response format for list_voices."),
            operation="list_voices",
        )
    return voices


async def get_balance(http: httpx.AsyncClient) -> Dict[str, Any]:
    """
    GET /balance and unwrap ``{"balance": {...}}``. The inner object carries
    total_credits, used_credits, remaining_credits, overage_characters and
    overage_amount_usd.
    """
    data = await _get_json(http, "/balance", operation="get_balance", failure="Failed to get balance")
    balance = data.get("balance") if isinstance(data, dict) else None
    if not isinstance(balance, dict):
        raise_logged(
            FormatError("Failed to get balance: Unexpected response format for get_balance."),
            operation="get_balance",
        )
    return balance


async def _get_json(http: httpx.AsyncClient, path: str, *, operation: str, failure: str) -> Any:
    resp = await send(http, "GET", path, operation=operation, failure=failure)
    try:
        return resp.json()
    except ValueError as e:
        raise_logged(
            FormatError("%s: response body is not JSON." % failure),
            operation=operation,
            cause=e,
        )
