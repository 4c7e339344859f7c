"""Clipboard access through the running Textual app."""

from __future__ import annotations

import logging

from textual.app import App

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when text cannot be placed on the clipboard."""


class TextualClipboard:
    """Copies text with the terminal's OSC 52 support via Textual."""

    def __init__(self, app: App) -> None:
        self._app = app

    def copy(self, text: str) -> None:
        try:
            self._app.copy_to_clipboard(text)
        except (OSError, RuntimeError) as exc:
            raise ClipboardError(str(exc)) from exc
        logger.debug("Copied %d characters to clipboard", len(text))
