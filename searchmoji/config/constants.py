"""
Centralized constants for searchmoji.

Timing, display text and environment-variable definitions live here so the
services and the UI agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

SEARCHMOJI_CONFIG_DIR = Path.home() / ".config" / "searchmoji"

# Bundled dataset shipped with the package
BUNDLED_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "emojis.json"

# =============================================================================
# NOTIFICATIONS
# =============================================================================

TOAST_DURATION_SECONDS = 2.0  # 2000 ms before the copy confirmation auto-hides
COPY_CONFIRMATION = "✅ Copied to clipboard!"

# =============================================================================
# DATA SOURCE
# =============================================================================

HTTP_TIMEOUT_SECONDS = 10  # Remote record payload fetch

# =============================================================================
# LOGGING
# =============================================================================

LOG_FILE_NAME = "searchmoji.log"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 2

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS: dict[str, dict] = {
    "SEARCHMOJI_DATA_SOURCE": {
        "description": "Path or http(s) URL of the JSON record payload",
        "default": None,
        "valid_values": None,
    },
    "SEARCHMOJI_LOG_LEVEL": {
        "description": "Log level for the searchmoji log file",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
