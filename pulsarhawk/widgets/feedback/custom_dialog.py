"""Dialog and notification widgets for the browser screen.

Dialog state lives in the application state; these widgets only mirror the
latest snapshot and never handle keys themselves.

CSS Classes: widget-custom-dialog, widget-custom-notification
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from pulsarhawk.models.state.modals import ConfirmationModal, InputModal, Notification

CONFIRM_HINT = "[a] accept  [n] refuse"
INPUT_HINT = "[enter] submit  [esc] cancel"


def confirmation_text(modal: ConfirmationModal) -> Text:
    text = Text(modal.message, style="bold")
    text.append(f"\n\n{CONFIRM_HINT}", style="dim")
    return text


def input_text(modal: InputModal) -> Text:
    text = Text(modal.message, style="bold")
    text.append("\n\n> ")
    text.append(modal.value)
    text.append("\u258f", style="blink")
    text.append(modal.suffix, style="dim")
    text.append(f"\n\n{INPUT_HINT}", style="dim")
    return text


def notification_text(notification: Notification) -> Text:
    style = "bold red" if notification.is_error else "bold green"
    return Text(notification.message, style=style)


class CustomConfirmDialog(Static):
    """Yes/no confirmation overlay."""

    DEFAULT_CSS = """
    CustomConfirmDialog {
        layer: overlay;
        width: auto;
        min-width: 40;
        max-width: 80%;
        height: auto;
        padding: 1 2;
        border: round $warning;
        background: $surface;
        offset: 10 6;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", classes="widget-custom-dialog", **kwargs)
        self.display = False

    def show_modal(self, modal: ConfirmationModal | None) -> None:
        if modal is None:
            self.display = False
            return
        self.update(confirmation_text(modal))
        self.display = True


class CustomInputDialog(Static):
    """Single-line input overlay."""

    DEFAULT_CSS = """
    CustomInputDialog {
        layer: overlay;
        width: auto;
        min-width: 40;
        max-width: 80%;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
        offset: 10 6;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", classes="widget-custom-dialog", **kwargs)
        self.display = False

    def show_modal(self, modal: InputModal | None) -> None:
        if modal is None:
            self.display = False
            return
        self.update(input_text(modal))
        self.display = True


class CustomNotification(Static):
    """Transient notification line."""

    DEFAULT_CSS = """
    CustomNotification {
        dock: bottom;
        height: auto;
        padding: 0 1;
        background: $surface;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", classes="widget-custom-notification", **kwargs)
        self.display = False

    def show_notification(self, notification: Notification | None) -> None:
        if notification is None:
            self.display = False
            return
        self.update(notification_text(notification))
        self.set_class(notification.is_error, "-error")
        self.display = True
