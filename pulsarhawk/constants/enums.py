"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Input Enums
# =============================================================================

class ControlEvent(Enum):
    """Logical controls produced by the input source."""

    ENTER = "enter"
    BACK = "back"
    UP = "up"
    DOWN = "down"
    CYCLE_SIDE = "cycle_side"
    SEARCH = "search"
    YANK = "yank"
    DELETE = "delete"
    SEEK = "seek"
    SKIP = "skip"
    SUBSCRIBE = "subscribe"
    ACCEPT = "accept"
    REFUSE = "refuse"
    CLEAR_INPUT = "clear_input"
    BACKSPACE = "backspace"
    TERMINATE = "terminate"


# =============================================================================
# Resource Enums
# =============================================================================

class ResourceKind(Enum):
    """Collections held by the resource store."""

    TENANTS = "tenants"
    NAMESPACES = "namespaces"
    TOPICS = "topics"
    SUBSCRIPTIONS = "subscriptions"
    CONSUMERS = "consumers"
    MESSAGES = "messages"


class SelectedPanel(Enum):
    """Focused panel while listening to a topic."""

    LIST = "list"
    PREVIEW = "preview"


class AuthType(Enum):
    """Supported credential kinds for cluster access."""

    NONE = "none"
    TOKEN = "token"
    OAUTH = "oauth"


__all__ = [
    "AuthType",
    "ControlEvent",
    "ResourceKind",
    "SelectedPanel",
]
