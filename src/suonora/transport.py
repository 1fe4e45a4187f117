from __future__ import annotations

import json
from typing import Any, Optional, Tuple

import httpx

from suonora.config import ClientConfig
from suonora.core.logging import get_logger
from suonora.errors import ApiError, TransportError, raise_logged


def create_http_client(
    config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    headers = {
        "Authorization": "Bearer %s" % (config.api_key,),
        "Content-Type": "application/json",
    }
    return httpx.AsyncClient(
        base_url=config.base_url,
        headers=headers,
        timeout=config.timeout_seconds,
        transport=transport,
    )


async def send(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    operation: str,
    failure: str,
    stream: bool = False,
    **kwargs: Any,
) -> httpx.Response:
    """
    Send one request and classify failures.

    No response at all -> TransportError; non-2xx -> ApiError carrying the status
    and the server's error body. With ``stream=True`` the returned response is
    still open and the caller owns closing it.
    """
    log = get_logger(component="suonora")
    log.debug("request", operation=operation, method=method, path=path)

    try:
        request = client.build_request(method, path, **kwargs)
        resp = await client.send(request, stream=stream)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise_logged(
            TransportError("%s: Network or request setup error: %s" % (failure, _cause(e))),
            operation=operation,
            cause=e,
        )

    if resp.is_success:
        return resp

    try:
        if stream:
            await resp.aread()
    except httpx.RequestError as e:
        raise_logged(
            TransportError("%s: Network or request setup error: %s" % (failure, _cause(e))),
            operation=operation,
            cause=e,
        )
    finally:
        if stream:
            await resp.aclose()

    body, body_text = error_body(resp)
    raise_logged(
        ApiError(
            "%s: HTTP %d: %s" % (failure, resp.status_code, body_text),
            status_code=resp.status_code,
            body=body,
        ),
        operation=operation,
    )


def error_body(resp: httpx.Response) -> Tuple[Any, str]:
    """Returns (decoded body, compact JSON rendering of it)."""
    try:
        body: Any = resp.json()
    except ValueError:
        body = resp.text
    return body, json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def _cause(e: BaseException) -> str:
    return str(e) or type(e).__name__
