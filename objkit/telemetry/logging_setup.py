"""Centralized logging configuration for objkit.

Library modules only call ``logging.getLogger("objkit.<area>")``; handlers are
attached here, on demand, by the embedding application.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from objkit.config.models import TelemetryConfig

_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render one LogRecord per line as a JSON object.

    Header fields come first in a fixed order (timestamp, level, logger, area,
    message). ``area`` is the logger name below the ``objkit`` root, e.g.
    ``lang.hash``. JSON-able ``extra`` values are grouped under ``context``,
    sorted by key; the traceback, if any, comes last.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "area": _logger_area(record.name),
            "message": record.getMessage(),
        }
        context = _record_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _logger_area(name: str) -> str:
    root, _, area = name.partition(".")
    if root == "objkit":
        return area or root
    return name


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    context: Dict[str, Any] = {}
    for key in sorted(record.__dict__):
        if key.startswith("_") or key in _RESERVED_ATTRS:
            continue
        value = record.__dict__[key]
        try:
            json.dumps(value, allow_nan=False)
        except (TypeError, ValueError):
            continue
        context[key] = value
    return context


def configure_logging(
    *,
    level: str = "INFO",
    logger_name: str = "objkit",
    log_dir: Path | None = None,
) -> Logger:
    """Configure ``logger_name`` with a JSON stream handler.

    When ``log_dir`` is given, a midnight-rotating JSON-lines file handler is
    attached as well.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{logger_name}.jsonl"
        handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_file": str(log_file) if log_file else None})
    return logger


def configure_from_config(config: TelemetryConfig) -> Logger:
    """Apply a :class:`TelemetryConfig` section via :func:`configure_logging`."""

    return configure_logging(
        level=config.log_level,
        logger_name=config.logger_name,
        log_dir=Path(config.log_dir) if config.log_dir else None,
    )


__all__ = ["JsonFormatter", "configure_from_config", "configure_logging"]
