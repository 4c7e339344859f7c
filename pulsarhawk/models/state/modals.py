"""Modal dialog and notification state."""

from __future__ import annotations

from dataclasses import dataclass, field

from pulsarhawk.constants.limits import MAX_SEEK_HOURS_DIGITS
from pulsarhawk.constants.values import SEEK_UNIT_PLURAL, SEEK_UNIT_SINGULAR
from pulsarhawk.models.state.commands import PendingCommand, SubscriptionTarget


@dataclass(frozen=True, slots=True)
class ConfirmationModal:
    """Yes/no gate in front of a deferred command."""

    message: str
    command: PendingCommand


def hours_suffix(value: str) -> str:
    return SEEK_UNIT_SINGULAR if value == "1" else SEEK_UNIT_PLURAL


@dataclass(slots=True)
class InputModal:
    """Free-text or numeric capture dialog."""

    message: str
    value: str = ""
    numeric_only: bool = False
    target: SubscriptionTarget | None = None
    suffix: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self._refresh_suffix()

    def _refresh_suffix(self) -> None:
        self.suffix = hours_suffix(self.value) if self.numeric_only else ""

    def accepts(self, char: str) -> bool:
        if not self.numeric_only:
            return True
        # int() must parse the buffer; non-ASCII digits such as "²" are refused.
        is_digit = len(char) == 1 and char.isascii() and char.isdigit()
        return is_digit and len(self.value) < MAX_SEEK_HOURS_DIGITS

    def push_char(self, char: str) -> bool:
        """Append ``char`` when admitted; returns whether it was."""
        if not self.accepts(char):
            return False
        self.value += char
        self._refresh_suffix()
        return True

    def pop_char(self) -> None:
        self.value = self.value[:-1]
        self._refresh_suffix()

    def clear(self) -> None:
        self.value = ""
        self._refresh_suffix()


@dataclass(frozen=True, slots=True)
class Notification:
    """Transient message shown until its dismiss timer fires."""

    message: str
    is_error: bool = False
    notification_id: int = 0
