"""Logging setup: JSON lines in production, readable lines in development.

Scrape requests bind a request id and the recipe URL to the current
context so every log line emitted while handling them carries both.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlsplit

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
recipe_url_ctx: ContextVar[str | None] = ContextVar("recipe_url", default=None)

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    "request_id": request_id_ctx,
    "recipe_url": recipe_url_ctx,
}

# Third-party loggers that are too chatty at the application level
_LIBRARY_LEVELS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
}


def current_context() -> dict[str, str]:
    """Return the logging context values bound in the current task."""
    return {name: value for name, var in _CONTEXT_VARS.items() if (value := var.get())}


def _short_url(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.netloc}{parts.path}" or url


class StructuredJsonFormatter(logging.Formatter):
    """One JSON object per line, for log shipping in production."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **current_context(),
        }

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            entry.update(extra_data)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry["location"] = f"{record.filename}:{record.lineno} ({record.funcName})"
        return json.dumps(entry, default=str)


class ContextualFormatter(logging.Formatter):
    """Readable single-line format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        context = current_context()
        tags = []
        if "request_id" in context:
            tags.append(f"req={context['request_id'][:8]}")
        if "recipe_url" in context:
            tags.append(f"url={_short_url(context['recipe_url'])}")

        when = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        where = record.name + (f" [{' '.join(tags)}]" if tags else "")
        line = f"{when} {record.levelname:<8} {where}: {record.getMessage()}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that copies the bound context into each record."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        kwargs["extra"] = {**current_context(), **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(log_level: str = "INFO", json_format: bool | None = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        log_level: Level for the application loggers. LOG_LEVEL overrides it.
        json_format: Force JSON or text output. When None, JSON is used if
            LOG_FORMAT=json, or when running in production without a terminal.
    """
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "").lower() == "json" or (
            os.getenv("ENVIRONMENT", "development") == "production" and not sys.stdout.isatty()
        )

    level_name = os.getenv("LOG_LEVEL", log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredJsonFormatter() if json_format else ContextualFormatter())

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("recipecollector").setLevel(level)
    for name, library_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)

    get_logger(__name__).debug(
        f"Logging configured: level={level_name}, format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Bind request id and recipe URL for the duration of a with-block."""

    def __init__(self, request_id: str | None = None, recipe_url: str | None = None):
        self._values = {"request_id": request_id, "recipe_url": recipe_url}
        self._tokens: list[tuple[ContextVar[str | None], Token]] = []

    def __enter__(self) -> "LoggingContext":
        for name, value in self._values.items():
            if value is not None:
                var = _CONTEXT_VARS[name]
                self._tokens.append((var, var.set(value)))
        return self

    def __exit__(self, *args: Any) -> None:
        while self._tokens:
            var, token = self._tokens.pop()
            var.reset(token)
