"""Default values for settings.

All default values used in AppSettings model and input dialogs.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# Configuration defaults
# ============================================================================

CONFIG_ENV_VAR: Final = "PULSARHAWK_CONFIG"
CONFIG_PATH_DEFAULT: Final = Path.home() / ".config" / "pulsarhawk" / "config.yaml"
CLUSTER_NAME_DEFAULT: Final = "default"
PULSAR_URL_DEFAULT: Final = "ws://localhost:8080"
ADMIN_URL_DEFAULT: Final = "http://localhost:8080"

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "INFO"
LOG_FILE_DEFAULT: Final = Path.home() / ".cache" / "pulsarhawk" / "pulsarhawk.log"

# ============================================================================
# Dialog defaults
# ============================================================================

SEEK_HOURS_DEFAULT: Final = "24"

__all__ = [
    "ADMIN_URL_DEFAULT",
    "CLUSTER_NAME_DEFAULT",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PULSAR_URL_DEFAULT",
    "SEEK_HOURS_DEFAULT",
]
