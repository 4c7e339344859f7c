"""Browser screen presenter - turns a DrawState into rich renderables.

Everything here is a pure function of the snapshot; nothing reads or writes
application state.
"""

from __future__ import annotations

from typing import Any

from rich.table import Table
from rich.text import Text

from pulsarhawk.constants.enums import ResourceKind, SelectedPanel
from pulsarhawk.constants.values import APP_TITLE, PLACEHOLDER_DASH
from pulsarhawk.models.resources import Consumer, Message, Subscription
from pulsarhawk.models.state.active_resource import Listening
from pulsarhawk.models.state.app_state import DrawState
from pulsarhawk.models.state.filterable import CollectionView, Search
from pulsarhawk.models.state.resource_store import kind_of
from pulsarhawk.screens.browser.config import (
    COLUMNS,
    COMMON_HELP,
    HELP_BY_KIND,
    LIST_SCROLL_MARGIN,
)
from pulsarhawk.utils.message_decoding import body_preview_line, pretty_body


def active_view(snapshot: DrawState) -> CollectionView:
    kind = kind_of(snapshot.active_resource)
    return {
        ResourceKind.TENANTS: snapshot.tenants,
        ResourceKind.NAMESPACES: snapshot.namespaces,
        ResourceKind.TOPICS: snapshot.topics,
        ResourceKind.SUBSCRIPTIONS: snapshot.subscriptions,
        ResourceKind.CONSUMERS: snapshot.consumers,
        ResourceKind.MESSAGES: snapshot.messages,
    }[kind]


# =============================================================================
# Header and titles
# =============================================================================


def header_text(snapshot: DrawState) -> Text:
    text = Text()
    text.append("cluster: ", style="dim")
    text.append(snapshot.cluster_name or PLACEHOLDER_DASH, style="bold")
    if snapshot.cluster_url:
        text.append(f"  {snapshot.cluster_url}", style="dim")
    text.append(f"    {APP_TITLE} {snapshot.version}", style="dim")
    if snapshot.latest_version and snapshot.latest_version != snapshot.version:
        text.append(f" (latest: {snapshot.latest_version})", style="yellow")
    if snapshot.loading:
        text.append("    loading…", style="italic cyan")
    return text


def breadcrumb(snapshot: DrawState) -> str:
    kind = kind_of(snapshot.active_resource)
    parts: list[str] = []
    if kind is not ResourceKind.TENANTS and snapshot.selected_tenant:
        parts.append(snapshot.selected_tenant)
    if kind in (
        ResourceKind.TOPICS,
        ResourceKind.SUBSCRIPTIONS,
        ResourceKind.CONSUMERS,
        ResourceKind.MESSAGES,
    ) and snapshot.selected_namespace:
        parts.append(snapshot.selected_namespace)
    if kind in (
        ResourceKind.SUBSCRIPTIONS,
        ResourceKind.CONSUMERS,
        ResourceKind.MESSAGES,
    ) and snapshot.selected_topic:
        parts.append(snapshot.selected_topic)
    if kind is ResourceKind.CONSUMERS and snapshot.selected_subscription:
        parts.append(snapshot.selected_subscription)
    return "/".join(parts)


def list_title(snapshot: DrawState) -> str:
    active = snapshot.active_resource
    if isinstance(active, Listening):
        return f"{len(snapshot.messages.all)} messages of {snapshot.selected_topic or PLACEHOLDER_DASH}"
    title = active.label
    path = breadcrumb(snapshot)
    return f"{title} of {path}" if path else title


def search_text(search: Search | None) -> Text:
    if search is None:
        return Text("")
    text = Text("/", style="bold")
    text.append(search.value)
    if search.expecting_input:
        text.append("▏", style="blink")
    return text


def help_text(snapshot: DrawState) -> Text:
    items = HELP_BY_KIND[kind_of(snapshot.active_resource)] + COMMON_HELP
    text = Text()
    for index, (keys, description) in enumerate(items):
        if index:
            text.append("  ")
        text.append(keys, style="bold")
        text.append(f" {description}", style="dim")
    return text


# =============================================================================
# Rows
# =============================================================================


def row_cells(item: Any) -> list[str]:
    if isinstance(item, Message):
        return [body_preview_line(item.body)]
    if isinstance(item, Subscription):
        return [
            item.name,
            item.sub_type or PLACEHOLDER_DASH,
            str(item.consumer_count),
            str(item.backlog_size),
        ]
    if isinstance(item, Consumer):
        return [
            item.name or PLACEHOLDER_DASH,
            str(item.unacked_messages),
            item.connected_since or PLACEHOLDER_DASH,
        ]
    return [item.name]


def visible_window(count: int, cursor: int | None, height: int) -> range:
    """Slice of row indexes to draw so the cursor stays on screen."""
    if height <= 0 or count <= height:
        return range(count)
    position = cursor or 0
    start = max(0, position - (height - 1 - LIST_SCROLL_MARGIN))
    start = min(start, count - height)
    return range(start, start + height)


def build_table(snapshot: DrawState, height: int = 0, focused: bool = True) -> Table:
    kind = kind_of(snapshot.active_resource)
    view = active_view(snapshot)
    table = Table(expand=True, box=None, show_edge=False, pad_edge=False)
    for name, width in COLUMNS[kind]:
        table.add_column(name, min_width=min(width, 12), ratio=width, no_wrap=True)
    cursor_style = "reverse" if focused else "underline"
    for index in visible_window(len(view.filtered), view.cursor, height):
        style = cursor_style if index == view.cursor else None
        table.add_row(*row_cells(view.filtered[index]), style=style)
    return table


# =============================================================================
# Message preview
# =============================================================================


def preview_lines(message: Message | None) -> list[str]:
    if message is None:
        return []
    lines = list(message.properties)
    if lines:
        lines.append("")
    lines.extend(pretty_body(message.body).splitlines())
    return lines


def preview_text(snapshot: DrawState) -> Text:
    lines = preview_lines(snapshot.messages.selected)
    offset = min(snapshot.scroll_offset, max(0, len(lines) - 1))
    text = Text("\n".join(lines[offset:]))
    search = snapshot.messages.search
    needle = search.value.replace(" ", "") if search is not None else ""
    if needle:
        text.highlight_words([needle], style="black on yellow")
    return text


def preview_focused(snapshot: DrawState) -> bool:
    return snapshot.panel is SelectedPanel.PREVIEW

