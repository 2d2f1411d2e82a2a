"""Centralized logging configuration using Loguru.

Logs go to stderr so they never mix with the report on stdout. In JSON mode
records are written as Pino-compatible NDJSON, which lets a CI job parse them
alongside ``--json`` reports.

Usage:
    from logstrip.utils.logging import logger
    logger.debug("Skipping {path}", path=path)

Environment Variables:
    LOGSTRIP_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    LOGSTRIP_LOG_JSON: 0|1 (default: 0, human-readable)
    LOGSTRIP_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys

from loguru import logger

logger.remove()

# Pino-compatible numeric levels
PINO_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("LOGSTRIP_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("LOGSTRIP_LOG_JSON", "0") == "1"
_log_file = os.environ.get("LOGSTRIP_LOG_FILE")

# No emojis - Windows CP1252 consoles
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")


def _pino_record(record) -> dict:
    """Convert a loguru record into a Pino-shaped dict."""
    pino_log = {
        "level": PINO_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "name": "log-strip",
    }
    for key, value in record["extra"].items():
        pino_log[key] = value if isinstance(value, (str, int, float, bool)) else str(value)

    if record["exception"]:
        exc = record["exception"]
        pino_log["err"] = {
            "type": exc.type.__name__ if exc.type else "Error",
            "message": str(exc.value) if exc.value else "",
        }
    return pino_log


def pino_compatible_sink(message):
    """Write one NDJSON line per record to stderr.

    Never call logger.* inside a sink - causes infinite recursion.
    """
    sys.stderr.write(json.dumps(_pino_record(message.record)) + "\n")
    sys.stderr.flush()


def _file_pino_sink(message):
    """Append one NDJSON line per record to LOGSTRIP_LOG_FILE."""
    with open(_log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(_pino_record(message.record)) + "\n")


_console_handler_id: int | None = None


def _add_console_handler(level: str) -> int:
    if _json_mode:
        return logger.add(pino_compatible_sink, level=level, colorize=False)
    return logger.add(
        sys.stderr,
        level=level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )


_console_handler_id = _add_console_handler(_log_level)

if _log_file:
    logger.add(_file_pino_sink, level="DEBUG")


def set_level(level: str) -> None:
    """Replace the console handler with one at ``level``."""
    global _console_handler_id, _log_level

    _log_level = level.upper()
    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            pass  # Already removed
    _console_handler_id = _add_console_handler(_log_level)


def get_level() -> str:
    return _log_level


__all__ = [
    "logger",
    "set_level",
    "get_level",
]
