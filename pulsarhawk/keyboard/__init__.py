"""Keyboard mapping module.

Translates physical keys into the logical controls consumed by the
dispatcher:

- app: KEY_CONTROLS table and translate_key()
"""

from pulsarhawk.keyboard.app import KEY_CONTROLS, translate_key

__all__ = [
    "KEY_CONTROLS",
    "translate_key",
]
