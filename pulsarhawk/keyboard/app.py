"""App-level key mapping.

Physical keys are translated into logical controls here; everything else in
the application only sees ``Control`` and ``CharInput`` events.
"""

from __future__ import annotations

from pulsarhawk.constants.enums import ControlEvent
from pulsarhawk.engine.events import CharInput, Control, Event

# ============================================================================
# Key name -> logical control
# ============================================================================

KEY_CONTROLS: dict[str, ControlEvent] = {
    "enter": ControlEvent.ENTER,
    "escape": ControlEvent.BACK,
    "left": ControlEvent.BACK,
    "up": ControlEvent.UP,
    "k": ControlEvent.UP,
    "down": ControlEvent.DOWN,
    "j": ControlEvent.DOWN,
    "tab": ControlEvent.CYCLE_SIDE,
    "slash": ControlEvent.SEARCH,
    "y": ControlEvent.YANK,
    "d": ControlEvent.DELETE,
    "s": ControlEvent.SEEK,
    "x": ControlEvent.SKIP,
    "ctrl+s": ControlEvent.SUBSCRIBE,
    "a": ControlEvent.ACCEPT,
    "n": ControlEvent.REFUSE,
    "ctrl+u": ControlEvent.CLEAR_INPUT,
    "backspace": ControlEvent.BACKSPACE,
    "ctrl+c": ControlEvent.TERMINATE,
    "ctrl+q": ControlEvent.TERMINATE,
}


def _typed_character(character: str | None) -> str | None:
    if character and len(character) == 1 and character.isprintable():
        return character
    return None


def translate_key(key: str, character: str | None) -> Event | None:
    """Map a Textual key event to an input event, or None to ignore it."""
    control = KEY_CONTROLS.get(key)
    typed = _typed_character(character)
    if control is not None:
        return Control(control, typed)
    if typed is not None:
        return CharInput(typed)
    return None


__all__ = [
    "KEY_CONTROLS",
    "translate_key",
]
