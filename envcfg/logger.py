import json
import logging
import sys
import time
from typing import Any

from .variable import lookup

_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}

_TOP_LEVEL = ("key", "reason")


class JsonFormatter(logging.Formatter):
    """JSON log formatter; variable key and parse reason are top-level fields."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for field in _TOP_LEVEL:
            if field in record.__dict__:
                payload[field] = record.__dict__[field]

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED and k not in _TOP_LEVEL}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or "envcfg")


def log_parse_failure(err) -> None:
    """Parse observer that logs a warning; pass to set_parse_log or EnvReader."""
    get_logger("envcfg.parse").warning(
        str(err),
        extra={"key": getattr(err, "key", None), "reason": getattr(err, "reason", str(err))},
    )


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
) -> None:
    """Configures root logging from arguments, falling back to LOG_LEVEL, LOG_FORMAT and LOG_UTC."""
    level_str = (level if level is not None else (lookup("LOG_LEVEL").with_default("INFO") or "INFO")).upper()
    fmt_str = (fmt if fmt is not None else (lookup("LOG_FORMAT").with_default("plain") or "plain")).lower()
    use_utc = (lookup("LOG_UTC").with_default("true") if utc is None else str(utc)).lower() == "true"

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))

    root.addHandler(handler)

    log = get_logger("envcfg.boot")
    log.info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
