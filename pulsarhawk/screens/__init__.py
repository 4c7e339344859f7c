"""Screens module for pulsarhawk.

- browser: the resource browser and live-tail screen
"""

from pulsarhawk.screens.browser import BrowserScreen

__all__ = ["BrowserScreen"]
