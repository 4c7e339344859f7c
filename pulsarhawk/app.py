"""Main application class for pulsarhawk."""

from __future__ import annotations

import logging

from textual.app import App
from textual.events import Key

from pulsarhawk.constants import APP_TITLE, IDLE_POLL_INTERVAL
from pulsarhawk.controllers.admin.controller import PulsarAdminController
from pulsarhawk.controllers.auth import TokenProvider
from pulsarhawk.controllers.messaging.listener import PulsarListener
from pulsarhawk.controllers.version_checker import VersionChecker
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.dispatcher import Dispatcher
from pulsarhawk.keyboard import translate_key
from pulsarhawk.models.state.app_settings import AppSettings
from pulsarhawk.models.state.app_state import AppState
from pulsarhawk.screens import BrowserScreen
from pulsarhawk.utils.clipboard import TextualClipboard

logger = logging.getLogger(__name__)


class PulsarHawkApp(App[None]):
    """Main TUI application for pulsarhawk.

    Textual acts as input source and renderer only. Key presses become events
    on the channel and the dispatcher, running as a worker on the same loop,
    pushes snapshots back to the browser screen.
    """

    TITLE = APP_TITLE
    ENABLE_COMMAND_PALETTE = False
    inherit_bindings = False

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        admin: PulsarAdminController | None = None,
        listener: PulsarListener | None = None,
        idle_interval: float = IDLE_POLL_INTERVAL,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        token_provider = TokenProvider(self.settings.auth)
        self.admin = admin or PulsarAdminController(
            self.settings.admin_url,
            token_provider,
            request_timeout=self.settings.request_timeout_seconds,
            fetch_attempts=self.settings.fetch_attempts,
        )
        self.listener = listener or PulsarListener(self.settings.pulsar_url, token_provider)
        self.channel = EventChannel()
        self.state = AppState(
            cluster_name=self.settings.cluster_name,
            cluster_url=self.settings.admin_url,
        )
        self.browser = BrowserScreen(self.handle_key)
        self.dispatcher = Dispatcher(
            self.state,
            self.admin,
            self.listener,
            self.channel,
            render=self.browser.render_snapshot,
            clipboard=TextualClipboard(self),
            max_live_messages=self.settings.max_live_messages,
            idle_interval=idle_interval,
        )

    def on_mount(self) -> None:
        self.push_screen(self.browser)
        self.dispatcher.start(self.settings.default_tenant)
        if self.settings.release_url:
            checker = VersionChecker(
                self.settings.release_url,
                self.channel,
                interval=self.settings.version_check_interval_seconds,
            )
            self.dispatcher.spawn(checker.run(), "version-check")
        self.run_worker(self._run_dispatcher(), name="dispatcher", exclusive=True)

    async def _run_dispatcher(self) -> None:
        try:
            await self.dispatcher.run()
        finally:
            await self.dispatcher.shutdown()
        self.exit()

    def handle_key(self, event: Key) -> None:
        """Translate a key press and queue it for the dispatcher."""
        translated = translate_key(event.key, event.character)
        if translated is None:
            logger.debug("Ignoring key %s", event.key)
            return
        self.channel.put(translated)

    def on_unmount(self) -> None:
        self.dispatcher.live_tail.stop()
