"""Centralized constants for the shellaudit utils package.

Single source of truth for the state directory and the files written into it.
"""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# State directory for config, logs and error traces
STATE_DIR = Path("./.shellaudit")

CONFIG_FILE = STATE_DIR / "config.json"
ERROR_LOG_FILE = STATE_DIR / "error.log"

# ============================================================================
# FILE PROCESSING LIMITS
# ============================================================================

# Scripts larger than this are skipped by the CLI (2MB)
MAX_FILE_SIZE = 2 * 1024 * 1024
