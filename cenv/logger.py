import json
import logging
import sys
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import EnvConfig

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
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

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

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
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
    return logging.getLogger(name or "cenv")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    config: "EnvConfig | None" = None,
) -> None:
    """
    Configures root logging.

    Unset arguments come from LOG_LEVEL (INFO), LOG_FORMAT (plain|json) and
    LOG_UTC (true), read through ``config`` (process environment by default).
    """
    if config is None:
        from .config import EnvConfig
        config = EnvConfig()

    level_str = (level if level is not None else (config.get_string("log.level").value or "INFO")).upper()
    fmt_str = (fmt if fmt is not None else (config.get_string("log.format").value or "plain")).lower()
    if utc is None:
        parsed, err = config.get_bool("log.utc")
        utc = parsed if err is None else True

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    level_no = logging.getLevelName(level_str)
    root.setLevel(level_no if isinstance(level_no, int) else logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=utc))
    else:
        handler.setFormatter(PlainFormatter(utc=utc))

    root.addHandler(handler)

    log = get_logger("cenv.boot")
    log.info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": utc})
