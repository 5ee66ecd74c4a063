"""shellaudit utilities package."""

from .constants import CONFIG_FILE, ERROR_LOG_FILE, MAX_FILE_SIZE, STATE_DIR
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "STATE_DIR",
    "CONFIG_FILE",
    "ERROR_LOG_FILE",
    "MAX_FILE_SIZE",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
