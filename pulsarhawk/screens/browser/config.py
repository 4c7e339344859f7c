"""Browser screen configuration - column definitions, titles and help hints."""

from __future__ import annotations

from pulsarhawk.constants.enums import ResourceKind

# =============================================================================
# Widget IDs
# =============================================================================

HEADER_ID = "browser-header"
LIST_TITLE_ID = "browser-list-title"
LIST_ID = "browser-list"
PREVIEW_ID = "browser-preview"
SEARCH_ID = "browser-search"
HELP_ID = "browser-help"
CONFIRM_DIALOG_ID = "confirm-dialog"
INPUT_DIALOG_ID = "input-dialog"
NOTIFICATION_ID = "notification"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

TENANT_COLUMNS: list[tuple[str, int]] = [
    ("Tenant", 40),
]

NAMESPACE_COLUMNS: list[tuple[str, int]] = [
    ("Namespace", 40),
]

TOPIC_COLUMNS: list[tuple[str, int]] = [
    ("Topic", 50),
]

SUBSCRIPTION_COLUMNS: list[tuple[str, int]] = [
    ("Subscription", 50),
    ("Type", 12),
    ("Consumers", 10),
    ("Backlog", 12),
]

CONSUMER_COLUMNS: list[tuple[str, int]] = [
    ("Consumer", 40),
    ("Unacked", 10),
    ("Connected since", 30),
]

MESSAGE_COLUMNS: list[tuple[str, int]] = [
    ("Message", 60),
]

COLUMNS: dict[ResourceKind, list[tuple[str, int]]] = {
    ResourceKind.TENANTS: TENANT_COLUMNS,
    ResourceKind.NAMESPACES: NAMESPACE_COLUMNS,
    ResourceKind.TOPICS: TOPIC_COLUMNS,
    ResourceKind.SUBSCRIPTIONS: SUBSCRIPTION_COLUMNS,
    ResourceKind.CONSUMERS: CONSUMER_COLUMNS,
    ResourceKind.MESSAGES: MESSAGE_COLUMNS,
}

# =============================================================================
# Help hints: (keys, description)
# =============================================================================

COMMON_HELP: list[tuple[str, str]] = [
    ("j/k", "move"),
    ("/", "search"),
    ("esc", "back"),
    ("ctrl+q", "quit"),
]

HELP_BY_KIND: dict[ResourceKind, list[tuple[str, str]]] = {
    ResourceKind.TENANTS: [("enter", "namespaces")],
    ResourceKind.NAMESPACES: [("enter", "topics")],
    ResourceKind.TOPICS: [("enter", "subscriptions"), ("ctrl+s", "listen")],
    ResourceKind.SUBSCRIPTIONS: [
        ("enter", "consumers"),
        ("d", "delete"),
        ("x", "skip all"),
        ("s", "seek"),
    ],
    ResourceKind.CONSUMERS: [],
    ResourceKind.MESSAGES: [("tab", "switch panel"), ("y", "copy"), ("s", "seek")],
}

# Rows kept visible above the cursor when the list is taller than the screen.
LIST_SCROLL_MARGIN = 3
