"""Widgets module for pulsarhawk.

This module provides the reusable widgets of the browser screen:
- feedback: confirmation and input dialogs, notifications
"""

from pulsarhawk.widgets.feedback import (
    CustomConfirmDialog,
    CustomInputDialog,
    CustomNotification,
)

__all__ = [
    "CustomConfirmDialog",
    "CustomInputDialog",
    "CustomNotification",
]
