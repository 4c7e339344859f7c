"""Modal subsystem: confirmation gates and the seek input dialog."""

from __future__ import annotations

import logging
from datetime import timedelta

from pulsarhawk.constants.defaults import SEEK_HOURS_DEFAULT
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import CommandIssued
from pulsarhawk.models.state.app_state import AppState
from pulsarhawk.models.state.commands import (
    PendingCommand,
    SeekSubscription,
    SubscriptionTarget,
)
from pulsarhawk.models.state.modals import ConfirmationModal, InputModal

logger = logging.getLogger(__name__)


class ModalController:
    """Opens, edits and resolves the dialogs held in AppState."""

    def __init__(self, state: AppState, channel: EventChannel) -> None:
        self._state = state
        self._channel = channel

    # ------------------------------------------------------------------
    # Confirmation
    # ------------------------------------------------------------------

    def confirm(self, message: str, command: PendingCommand) -> None:
        self._state.confirmation = ConfirmationModal(message=message, command=command)

    def dismiss_confirmation(self) -> bool:
        if self._state.confirmation is None:
            return False
        self._state.confirmation = None
        return True

    def accept(self) -> bool:
        """Re-emit the captured command through the event channel."""
        confirmation = self._state.confirmation
        if confirmation is None:
            return False
        self._state.confirmation = None
        self._channel.put(CommandIssued(confirmation.command))
        return True

    def refuse(self) -> bool:
        return self.dismiss_confirmation()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def open_seek(self, message: str, target: SubscriptionTarget) -> None:
        self._state.input_modal = InputModal(
            message=message,
            value=SEEK_HOURS_DEFAULT,
            numeric_only=True,
            target=target,
        )

    def close_input(self) -> bool:
        if self._state.input_modal is None:
            return False
        self._state.input_modal = None
        return True

    def push_char(self, char: str) -> bool:
        modal = self._state.input_modal
        if modal is None:
            return False
        return modal.push_char(char)

    def pop_char(self) -> None:
        if self._state.input_modal is not None:
            self._state.input_modal.pop_char()

    def clear_input(self) -> None:
        if self._state.input_modal is not None:
            self._state.input_modal.clear()

    def submit_seek(self) -> SeekSubscription | None:
        """Turn the hours typed so far into a seek command.

        An empty buffer leaves the dialog open and issues nothing.
        """
        modal = self._state.input_modal
        if modal is None or not modal.value or modal.target is None:
            return None
        command = SeekSubscription(
            target=modal.target, time_delta=timedelta(hours=int(modal.value))
        )
        self._state.input_modal = None
        self._channel.put(CommandIssued(command))
        return command

    def dismiss_any(self) -> bool:
        """Close whichever dialog is open; returns False when none was."""
        closed_input = self.close_input()
        closed_confirmation = self.dismiss_confirmation()
        return closed_input or closed_confirmation
