"""Resource browser screen."""

from pulsarhawk.screens.browser.browser_screen import BrowserScreen

__all__ = ["BrowserScreen"]
