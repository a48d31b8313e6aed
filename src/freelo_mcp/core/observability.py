from __future__ import annotations

import logging
from typing import Any, Dict

EVENT_LOGGER = "freelo_mcp.observability"

# Attributes every LogRecord already owns; passing them as extras raises KeyError
RESERVED_LOG_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _extras(event: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    extra = {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}
    extra["event"] = event
    return extra


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit ``event`` as the message with ``fields`` attached as record extras."""
    (logger or logging.getLogger(EVENT_LOGGER)).log(
        level, event, extra=_extras(event, fields)
    )


def log_upstream_error(
    status_code: int, logger: logging.Logger | None = None, **fields: Any
) -> None:
    """Warn about a non-2xx Freelo answer that is being relayed to a caller."""
    log_event(
        "upstream_error",
        logger,
        level=logging.WARNING,
        upstream_status=status_code,
        **fields,
    )


__all__ = ["log_event", "log_upstream_error", "EVENT_LOGGER", "RESERVED_LOG_KEYS"]
