"""Feedback widgets for dialogs and notifications."""

from pulsarhawk.widgets.feedback.custom_dialog import (
    CustomConfirmDialog,
    CustomInputDialog,
    CustomNotification,
)

__all__ = [
    "CustomConfirmDialog",
    "CustomInputDialog",
    "CustomNotification",
]
