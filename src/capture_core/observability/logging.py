"""Logging setup for capture clients and the command line."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Structured extras copied into JSON records when present.
_EXTRA_FIELDS = ("event_name", "user_agent")


class JsonLogFormatter(logging.Formatter):
    """Serialize logs as line-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(
    level: str = "INFO",
    *,
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Install a console handler, plus a rotating file handler when ``log_file`` is set."""
    formatter = "json" if json_format else "text"
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": formatter,
            "stream": "ext://sys.stderr",
        }
    }

    if log_file:
        file_path = Path(log_file).expanduser().resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(file_path),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": formatter,
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "capture_core.observability.logging.JsonLogFormatter"},
                "text": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S%z",
                },
            },
            "handlers": handlers,
            "root": {"level": level, "handlers": list(handlers)},
        }
    )
