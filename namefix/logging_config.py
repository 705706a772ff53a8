"""Logging setup for the command line entry point.

Plain text lines by default, JSON lines when LOG_FORMAT=json.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter as BaseJsonFormatter

from .config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(BaseJsonFormatter):
    """JSON formatter with short field names."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")
        log_record["service"] = settings.app_name


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    file: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Log level name. Defaults to settings.logging.level
        fmt: "text" or "json". Defaults to settings.logging.format
        file: Optional log file path. Defaults to settings.logging.file, then stderr
    """
    level = (level or settings.logging.level).upper()
    fmt = fmt or settings.logging.format
    file = file or settings.logging.file

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if file:
        handler: logging.Handler = logging.FileHandler(file, encoding="utf-8")
    else:
        # stdout carries the report
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
