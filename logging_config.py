"""Project-wide logging setup.

Design goals:
- Keep stdout clean: the summary line is the only thing printed there, logs go
  to stderr and optionally to a UTF-8 file (safe for Chinese output).
- Be idempotent: calling setup_logging() multiple times won't duplicate handlers.

Usage:
    from logging_config import setup_logging
    setup_logging(level="DEBUG")
    setup_logging(log_file="logs/extract.log", json_format=True)

Environment overrides:
    ZHEXTRACT_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    ZHEXTRACT_LOG_FILE=path/to/file.log
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

_FILE_HANDLER_NAME = "zhextract_file"
_CONSOLE_HANDLER_NAME = "zhextract_console"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    level_str = (level or "").strip().upper()
    if not level_str:
        return logging.INFO

    return logging._nameToLevel.get(level_str, logging.INFO)


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | None = None,
    enable_console: bool = True,
    console_level: str | int = "WARNING",
    json_format: bool = False,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the root logger.

    File logging is enabled only when ``log_file`` (or ZHEXTRACT_LOG_FILE) is set.
    Returns the root logger.
    """
    env_level = os.environ.get("ZHEXTRACT_LOG_LEVEL")
    if env_level:
        level = env_level

    env_log_file = os.environ.get("ZHEXTRACT_LOG_FILE")
    if env_log_file:
        log_file = env_log_file

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # let handlers filter

    fmt: logging.Formatter
    if json_format:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    existing_by_name = {getattr(h, "name", ""): h for h in root.handlers}

    if log_file:
        log_path = Path(log_file)
        if not log_path.is_absolute():
            log_path = Path.cwd() / log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = existing_by_name.get(_FILE_HANDLER_NAME)
        if file_handler is None:
            file_handler = RotatingFileHandler(
                str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.name = _FILE_HANDLER_NAME
            root.addHandler(file_handler)

        file_handler.setFormatter(fmt)
        file_handler.setLevel(_parse_level(level))

    if enable_console:
        console_handler = existing_by_name.get(_CONSOLE_HANDLER_NAME)
        if console_handler is None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.name = _CONSOLE_HANDLER_NAME
            root.addHandler(console_handler)

        console_handler.setFormatter(fmt)
        console_handler.setLevel(_parse_level(console_level))

    logging.getLogger(__name__).debug(
        "Logging initialized | level=%s file=%s console=%s",
        level,
        log_file,
        enable_console,
    )

    return root
