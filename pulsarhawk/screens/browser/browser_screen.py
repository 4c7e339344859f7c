"""Resource browser screen.

The screen is a passive renderer: it draws DrawState snapshots handed to it by
the dispatcher and forwards every key press to the input source callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Static

from pulsarhawk.models.state.active_resource import Listening
from pulsarhawk.models.state.app_state import DrawState
from pulsarhawk.screens.browser.config import (
    CONFIRM_DIALOG_ID,
    HEADER_ID,
    HELP_ID,
    INPUT_DIALOG_ID,
    LIST_ID,
    LIST_TITLE_ID,
    NOTIFICATION_ID,
    PREVIEW_ID,
    SEARCH_ID,
)
from pulsarhawk.screens.browser.presenter import (
    active_view,
    build_table,
    header_text,
    help_text,
    list_title,
    preview_focused,
    preview_text,
    search_text,
)
from pulsarhawk.widgets import (
    CustomConfirmDialog,
    CustomInputDialog,
    CustomNotification,
)

logger = logging.getLogger(__name__)


class BrowserScreen(Screen[None]):
    """Single screen hosting every resource list and the live-tail view."""

    inherit_bindings = False

    DEFAULT_CSS = """
    BrowserScreen {
        layers: base overlay;
        layout: vertical;
    }

    #browser-header {
        height: 1;
        padding: 0 1;
        background: $panel;
    }

    #browser-body {
        height: 1fr;
    }

    #browser-list-pane {
        width: 1fr;
        border: round $primary;
    }

    #browser-list-pane.-blurred {
        border: round $panel;
    }

    #browser-list-title {
        text-style: bold;
        height: 1;
    }

    #browser-search {
        height: auto;
    }

    #browser-list {
        height: 1fr;
    }

    #browser-preview {
        width: 1fr;
        border: round $panel;
        padding: 0 1;
    }

    #browser-preview.-focused {
        border: round $primary;
    }

    #browser-help {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, on_key_event: Callable[[Key], None]) -> None:
        super().__init__()
        self._on_key_event = on_key_event
        self.last_snapshot: DrawState | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id=HEADER_ID)
        with Horizontal(id="browser-body"):
            with Vertical(id="browser-list-pane"):
                yield Static("", id=LIST_TITLE_ID)
                yield Static("", id=SEARCH_ID)
                yield Static("", id=LIST_ID)
            yield Static("", id=PREVIEW_ID)
        yield Static("", id=HELP_ID)
        yield CustomConfirmDialog(id=CONFIRM_DIALOG_ID)
        yield CustomInputDialog(id=INPUT_DIALOG_ID)
        yield CustomNotification(id=NOTIFICATION_ID)

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()
        self._on_key_event(event)

    def render_snapshot(self, snapshot: DrawState) -> None:
        """Redraw every widget from ``snapshot``."""
        self.last_snapshot = snapshot
        with suppress(NoMatches):
            self._render_widgets(snapshot)

    def _render_widgets(self, snapshot: DrawState) -> None:
        listening = isinstance(snapshot.active_resource, Listening)
        focused_preview = listening and preview_focused(snapshot)
        view = active_view(snapshot)

        self.query_one(f"#{HEADER_ID}", Static).update(header_text(snapshot))
        self.query_one(f"#{LIST_TITLE_ID}", Static).update(list_title(snapshot))

        search = self.query_one(f"#{SEARCH_ID}", Static)
        search.update(search_text(view.search))
        search.display = view.search is not None

        list_widget = self.query_one(f"#{LIST_ID}", Static)
        list_widget.update(
            build_table(
                snapshot,
                height=max(0, list_widget.size.height - 1),
                focused=not focused_preview,
            )
        )
        self.query_one("#browser-list-pane").set_class(focused_preview, "-blurred")

        preview = self.query_one(f"#{PREVIEW_ID}", Static)
        preview.display = listening
        if listening:
            preview.update(preview_text(snapshot))
            preview.set_class(focused_preview, "-focused")

        self.query_one(f"#{HELP_ID}", Static).update(help_text(snapshot))
        self.query_one(CustomConfirmDialog).show_modal(snapshot.confirmation)
        self.query_one(CustomInputDialog).show_modal(snapshot.input_modal)
        self.query_one(CustomNotification).show_notification(snapshot.notification)
