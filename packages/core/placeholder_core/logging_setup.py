"""Console and JSON file logging setup."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "placeholder"
_OWNED_ATTR = "_placeholder_owned"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


# Handlers attached to this logger by other code are left alone.
def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def _add_owned(logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _OWNED_ATTR, True)
    logger.addHandler(handler)


def configure_logging(level: int | str = logging.WARNING, log_file: Path | None = None, console: bool = True) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if _owned_handlers(logger):
        return logger

    logger.setLevel(level)
    logger.propagate = False

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(filename=str(log_file), encoding="utf-8")
        handler.setFormatter(JsonFormatter())
        _add_owned(logger, handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        _add_owned(logger, stream_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def reset_logging() -> None:
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
