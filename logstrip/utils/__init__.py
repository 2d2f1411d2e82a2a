"""log-strip utilities package."""

from .constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SKIP_DIRS,
    ERROR_LOG_FILE,
    STATE_DIR,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_SKIP_DIRS",
    "ERROR_LOG_FILE",
    "STATE_DIR",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
