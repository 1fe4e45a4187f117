from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

import structlog
from rich.logging import RichHandler

# Library loggers that are chatty at INFO when the CLI runs at DEBUG.
_QUIET_LOGGERS = ("httpx", "httpcore")

_EVENT_ICONS = {
    "request": "📡",
    "stream_opened": "🎧",
    "audio_saved": "💾",
    "voice_filters_ignored": "🔎",
}
_LEVEL_ICONS = {"error": "❌", "critical": "❌", "warning": "⚠️"}
_LEVEL_STYLES = {"error": "bold red", "critical": "bold red", "warning": "bold yellow"}


def configure_logging(level: str) -> None:
    """
    Console logging for the ``suonora`` CLI: structlog events rendered as one
    rich line each. Library code only calls ``get_logger``; applications that
    embed the client keep their own logging setup.
    """
    numeric = logging.getLevelName(level.upper())
    handler = RichHandler(rich_tracebacks=True, markup=True, show_path=False)
    logging.basicConfig(level=numeric, format="%(message)s", datefmt="[%X]", handlers=[handler])

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _RichLine(preferred=("component", "operation", "kind", "path", "status", "details")),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger().bind(**kwargs)


class _RichLine:
    """Final structlog processor: ``<icon> event  key=value ...`` with rich markup."""

    def __init__(self, *, preferred: Sequence[str]) -> None:
        self._preferred = tuple(preferred)

    def __call__(self, logger: Any, method_name: str, event_dict: Dict[str, Any]) -> str:  # pragma: no cover
        event = str(event_dict.pop("event", method_name))
        level = str(event_dict.pop("level", "")).lower()

        icon = _EVENT_ICONS.get(event) or _LEVEL_ICONS.get(level, "✅")
        style = _LEVEL_STYLES.get(level, "bold cyan")
        head = "[%s]%s %s[/%s]" % (style, icon, event, style)

        keys: List[str] = [k for k in self._preferred if k in event_dict]
        keys += sorted(k for k in event_dict if k not in self._preferred)
        if not keys:
            return head
        return "%s  %s" % (head, " ".join("%s=%r" % (k, event_dict[k]) for k in keys))
