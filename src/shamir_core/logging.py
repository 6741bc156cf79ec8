"""structlog wiring for library and CLI use."""
from __future__ import annotations

import logging
import sys

import structlog

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str | None = None) -> None:
    """Send JSON log lines to stderr.

    Each record has ``ts``, ``level``, ``component`` and ``msg`` keys. Stdout is
    left to command output.
    """

    threshold = _LEVELS.get((level or "info").lower(), logging.INFO)
    logging.basicConfig(level=threshold, handlers=[logging.StreamHandler(sys.stderr)], format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        cache_logger_on_first_use=True,
    )


def _add_component(logger: object, _method: str, event_dict: dict[str, object]) -> dict[str, object]:
    event_dict.setdefault("component", getattr(logger, "name", None) or "shamir_core")
    return event_dict


__all__ = ["configure_logging"]
