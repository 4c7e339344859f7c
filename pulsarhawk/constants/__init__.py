"""Constants module for pulsarhawk.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout and interval values (seconds)
- limits.py: Limit values (max/attempts)
- defaults.py: Default values for settings

Note: Key bindings are defined in pulsarhawk.keyboard module.
"""

from pulsarhawk.constants.defaults import (
    CONFIG_ENV_VAR,
    CONFIG_PATH_DEFAULT,
    SEEK_HOURS_DEFAULT,
)
from pulsarhawk.constants.enums import (
    AuthType,
    ControlEvent,
    ResourceKind,
    SelectedPanel,
)
from pulsarhawk.constants.limits import (
    ADMIN_FETCH_ATTEMPTS,
    MAX_LIVE_MESSAGES,
)
from pulsarhawk.constants.timeouts import (
    ADMIN_REQUEST_TIMEOUT,
    ERROR_NOTIFICATION_SECONDS,
    IDLE_POLL_INTERVAL,
    INFO_NOTIFICATION_SECONDS,
)
from pulsarhawk.constants.values import (
    APP_TITLE,
    APP_VERSION,
    SUBSCRIPTION_NAME_PREFIX,
)

__all__ = [
    "ADMIN_FETCH_ATTEMPTS",
    "ADMIN_REQUEST_TIMEOUT",
    "APP_TITLE",
    "APP_VERSION",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "ERROR_NOTIFICATION_SECONDS",
    "IDLE_POLL_INTERVAL",
    "INFO_NOTIFICATION_SECONDS",
    "MAX_LIVE_MESSAGES",
    "SEEK_HOURS_DEFAULT",
    "SUBSCRIPTION_NAME_PREFIX",
    "AuthType",
    "ControlEvent",
    "ResourceKind",
    "SelectedPanel",
]
