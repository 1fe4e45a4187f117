from __future__ import annotations

from typing import Any, NoReturn, Optional

from suonora.core.logging import get_logger


class SuonoraError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(SuonoraError):
    """The client could not be configured (e.g. no API key)."""


class ValidationError(SuonoraError):
    """Synthesis parameters were rejected before any request was sent."""


class ApiError(SuonoraError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, *, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(SuonoraError):
    """The request could not be sent or no response arrived."""


class FormatError(SuonoraError):
    """A JSON response did not have the expected envelope."""


def raise_logged(err: SuonoraError, *, operation: str, cause: Optional[BaseException] = None) -> NoReturn:
    get_logger(component="suonora").error(
        "suonora_error",
        operation=operation,
        kind=type(err).__name__,
        details=str(err),
    )
    if cause is not None:
        raise err from cause
    raise err
