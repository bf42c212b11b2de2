"""Shared logger writing JSON lines to a file and text lines to stdout."""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import datetime

from .settings import logs_file_path

LOGGER_NAME = "helga"

_lock = threading.Lock()
_configured = False
_file_handler: logging.Handler | None = None


def _fields(record: logging.LogRecord) -> tuple[str, str, str]:
    time = datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="microseconds")
    level = {logging.WARNING: "WARN", logging.CRITICAL: "ERROR"}.get(
        record.levelno, record.levelname
    )
    return time, level, record.getMessage()


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        time, level, msg = _fields(record)
        return json.dumps({"time": time, "level": level, "msg": msg})


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        time, level, msg = _fields(record)
        if msg == "" or any(ch in msg for ch in ' ="') or not msg.isprintable():
            msg = json.dumps(msg)
        return f"time={time} level={level} msg={msg}"


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is when each record is emitted."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, _value) -> None:
        pass


def _configure(path: str) -> None:
    global _file_handler
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.INFO)
    logger.propagate = False

    _file_handler = None
    try:
        _file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as exc:
        print(f"Failed to open log file: {exc}")
    else:
        _file_handler.setFormatter(_JsonFormatter())
        logger.addHandler(_file_handler)

    stdout_handler = _StdoutHandler()
    stdout_handler.setFormatter(_TextFormatter())
    logger.addHandler(stdout_handler)


def get_logger() -> logging.Logger:
    """Return the shared logger, setting it up on first use."""
    global _configured
    with _lock:
        if not _configured:
            _configure(logs_file_path())
            _configured = True
    return logging.getLogger(LOGGER_NAME)


def close_log_file() -> None:
    """Close the log file; the next ``get_logger()`` sets the logger up again."""
    global _configured, _file_handler
    with _lock:
        if _file_handler is not None:
            logging.getLogger(LOGGER_NAME).removeHandler(_file_handler)
            _file_handler.close()
            _file_handler = None
        _configured = False