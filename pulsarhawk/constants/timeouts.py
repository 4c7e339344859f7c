"""Timeout constants for the TUI.

All timeout and interval values for admin requests, the event loop, and timers.
"""

from typing import Final

# ============================================================================
# Event loop
# ============================================================================

# How long the dispatcher waits on the event channel before an idle redraw.
IDLE_POLL_INTERVAL: Final = 0.05

# ============================================================================
# Notifications (seconds)
# ============================================================================

INFO_NOTIFICATION_SECONDS: Final = 2.0
ERROR_NOTIFICATION_SECONDS: Final = 5.0

# ============================================================================
# Network timeouts (float, in seconds)
# ============================================================================

ADMIN_REQUEST_TIMEOUT: Final = 30.0
OAUTH_REQUEST_TIMEOUT: Final = 30.0
WEBSOCKET_HEARTBEAT: Final = 20.0
VERSION_CHECK_TIMEOUT: Final = 10.0

# ============================================================================
# Refresh intervals
# ============================================================================

VERSION_CHECK_INTERVAL: Final = 3600.0

__all__ = [
    "ADMIN_REQUEST_TIMEOUT",
    "ERROR_NOTIFICATION_SECONDS",
    "IDLE_POLL_INTERVAL",
    "INFO_NOTIFICATION_SECONDS",
    "OAUTH_REQUEST_TIMEOUT",
    "VERSION_CHECK_INTERVAL",
    "VERSION_CHECK_TIMEOUT",
    "WEBSOCKET_HEARTBEAT",
]
