"""Events carried by the unified channel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from pulsarhawk.constants.enums import ControlEvent, ResourceKind
from pulsarhawk.models.resources import Message
from pulsarhawk.models.state.active_resource import ActiveResource
from pulsarhawk.models.state.commands import MutationCommand, PendingCommand

if TYPE_CHECKING:
    from pulsarhawk.controllers.base.base_controller import WorkerResult


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """A listing issued by a navigation step.

    ``origin`` is the active resource when the request was made; the result
    only applies while it is still active. ``sticky`` refreshes keep the
    current search and selection, otherwise the list starts fresh.
    ``follow`` names an item to select and drill into once loaded.
    """

    kind: ResourceKind
    scope: tuple[str, ...]
    origin: ActiveResource
    target: ActiveResource
    sticky: bool = False
    follow: str | None = None


# =============================================================================
# Input
# =============================================================================


@dataclass(frozen=True, slots=True)
class Control:
    """Logical control; ``char`` is the character the key would type."""

    event: ControlEvent
    char: str | None = None


@dataclass(frozen=True, slots=True)
class CharInput:
    char: str


# =============================================================================
# Background results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ResourcesFetched:
    request: FetchRequest
    result: WorkerResult


@dataclass(frozen=True, slots=True)
class CommandIssued:
    command: PendingCommand


@dataclass(frozen=True, slots=True)
class MutationCompleted:
    command: MutationCommand
    result: WorkerResult


@dataclass(frozen=True, slots=True)
class MessageReceived:
    subscription_name: str
    message: Message


@dataclass(frozen=True, slots=True)
class ListenSessionEnded:
    subscription_name: str
    error: str | None = None


@dataclass(frozen=True, slots=True)
class LatestVersion:
    version: str


Event: TypeAlias = (
    Control
    | CharInput
    | ResourcesFetched
    | CommandIssued
    | MutationCompleted
    | MessageReceived
    | ListenSessionEnded
    | LatestVersion
)
