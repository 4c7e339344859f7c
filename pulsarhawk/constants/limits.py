"""Limit constants for the TUI.

Upper bounds for buffers and retry attempts.
"""

from typing import Final

# ============================================================================
# Live tail
# ============================================================================

MAX_LIVE_MESSAGES: Final = 10_000

# ============================================================================
# Admin requests
# ============================================================================

# Total attempts for read-only admin listings (first try included).
ADMIN_FETCH_ATTEMPTS: Final = 2

# ============================================================================
# Seek dialog
# ============================================================================

# Longest hours value the seek dialog accepts.
MAX_SEEK_HOURS_DIGITS: Final = 6

__all__ = [
    "ADMIN_FETCH_ATTEMPTS",
    "MAX_LIVE_MESSAGES",
    "MAX_SEEK_HOURS_DIGITS",
]
