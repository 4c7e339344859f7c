"""Scalar constants for the TUI.

Application identity, naming prefixes and fixed user-facing strings.
"""

from typing import Final

from pulsarhawk import __version__

# ============================================================================
# Application identity
# ============================================================================

APP_TITLE: Final = "pulsarhawk"
APP_VERSION: Final = __version__

# ============================================================================
# Live tail
# ============================================================================

# Ephemeral subscriptions created for a listen session are named
# "<prefix><uuid4>" so they are easy to spot in admin listings.
SUBSCRIPTION_NAME_PREFIX: Final = "pulsarhawk_subscription_"

# ============================================================================
# Display strings
# ============================================================================

UNDECODABLE_BODY_PLACEHOLDER: Final = "can't decode the body"
SEEK_UNIT_SINGULAR: Final = " hour"
SEEK_UNIT_PLURAL: Final = " hours"
PLACEHOLDER_DASH: Final = "-"

__all__ = [
    "APP_TITLE",
    "APP_VERSION",
    "PLACEHOLDER_DASH",
    "SEEK_UNIT_PLURAL",
    "SEEK_UNIT_SINGULAR",
    "SUBSCRIPTION_NAME_PREFIX",
    "UNDECODABLE_BODY_PLACEHOLDER",
]
