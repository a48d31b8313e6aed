import logging
import sys
from typing import Any, Iterator, Tuple

LOG_EXTRA_FIELDS = (
    "request_id",
    "method",
    "path",
    "endpoint",
    "status",
    "upstream_status",
    "duration_ms",
    "tool",
)

# httpx logs every upstream URL at INFO; the client emits its own op.* lines
CHATTY_LOGGERS = ("httpx", "httpcore")


def _quote(val: Any) -> str:
    if isinstance(val, (bool, int, float)):
        return str(val)
    text = str(val)
    if not text or any(ch in text for ch in ' ="'):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class LogfmtFormatter(logging.Formatter):
    """One ``key=value`` line per record; extras missing from a record are skipped."""

    def pairs(self, record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
        yield "level", record.levelname.lower()
        yield "logger", record.name
        message = record.getMessage()
        if message:
            yield "event", message
        for key in LOG_EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                yield key, value
        if record.exc_info and record.exc_info[0] is not None:
            yield "exc_type", record.exc_info[0].__name__

    def format(self, record: logging.LogRecord) -> str:
        return " ".join(f"{key}={_quote(value)}" for key, value in self.pairs(record))


def setup_logging(level: str = "INFO") -> None:
    """Route all logging to stderr as logfmt.

    stdout is left alone: the stdio transport writes JSON-RPC frames there.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
