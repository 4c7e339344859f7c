"""Navigation state machine.

Drill-down and drill-up never await the admin API inline. A step spawns a
fetch task that posts ResourcesFetched; the step completes when that event
arrives and the active resource is still the one the request started from.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

from pulsarhawk.constants.enums import ResourceKind
from pulsarhawk.controllers.admin.errors import AdminError
from pulsarhawk.controllers.base.base_controller import WorkerResult
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import FetchRequest, ResourcesFetched
from pulsarhawk.models.state.active_resource import (
    ActiveResource,
    Consumers,
    Listening,
    Namespaces,
    Subscriptions,
    Tenants,
    Topics,
)
from pulsarhawk.models.state.app_state import AppState
from pulsarhawk.models.state.commands import SubscriptionTarget

if TYPE_CHECKING:
    from pulsarhawk.controllers.admin.controller import PulsarAdminController
    from pulsarhawk.engine.live_tail import LiveTailController
    from pulsarhawk.engine.notifications import Notifier, Spawn

logger = logging.getLogger(__name__)


class Navigator:
    """Transitions between the active resource variants."""

    def __init__(
        self,
        state: AppState,
        admin: PulsarAdminController,
        channel: EventChannel,
        spawn: Spawn,
        notifier: Notifier,
        live_tail: LiveTailController,
    ) -> None:
        self._state = state
        self._admin = admin
        self._channel = channel
        self._spawn = spawn
        self._notifier = notifier
        self._live_tail = live_tail

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def request(
        self,
        kind: ResourceKind,
        scope: tuple[str, ...],
        target: ActiveResource,
        *,
        sticky: bool = False,
        follow: str | None = None,
    ) -> FetchRequest:
        request = FetchRequest(
            kind=kind,
            scope=scope,
            origin=self._state.active_resource,
            target=target,
            sticky=sticky,
            follow=follow,
        )
        self._state.pending_fetches += 1
        self._spawn(self._fetch(request), f"fetch-{kind.value}")
        return request

    def _call(self, request: FetchRequest) -> Awaitable[list[Any]]:
        admin = self._admin
        kind = request.kind
        if kind is ResourceKind.TENANTS:
            return admin.list_tenants()
        if kind is ResourceKind.NAMESPACES:
            return admin.list_namespaces(*request.scope)
        if kind is ResourceKind.TOPICS:
            return admin.list_topics(*request.scope)
        if kind is ResourceKind.SUBSCRIPTIONS:
            return admin.list_subscriptions(*request.scope)
        if kind is ResourceKind.CONSUMERS:
            return admin.list_consumers(*request.scope)
        raise ValueError(f"{kind.value} cannot be fetched from the admin API")

    async def _fetch(self, request: FetchRequest) -> None:
        try:
            result = await self._admin.run_guarded(
                lambda: self._call(request),
                errors=(AdminError,),
                label=f"Fetch {request.kind.value}",
            )
        except Exception as exc:
            # The loop still has to hear back or the loading count never drops.
            logger.exception("Fetch %s crashed", request.kind.value)
            result = WorkerResult(success=False, error=f"Unexpected error: {exc!r}")
        self._channel.put(ResourcesFetched(request, result))

    def on_fetched(self, event: ResourcesFetched) -> bool:
        """Complete the transition a fetch was issued for.

        Returns False when the result is stale and was dropped.
        """
        self._state.pending_fetches = max(0, self._state.pending_fetches - 1)
        request, result = event.request, event.result
        if self._state.active_resource != request.origin:
            logger.debug(
                "Dropping stale %s result (origin %s, now %s)",
                request.kind.value,
                request.origin,
                self._state.active_resource,
            )
            return False

        if not result.success:
            self._notifier.error(f"Failed to fetch {request.kind.value} :[ {result.error}")
            return True

        collection = self._state.store.collection(request.kind)
        if not request.sticky:
            collection.clear()
        collection.set_all(result.data or [])
        self._state.active_resource = request.target

        if request.follow:
            for index, item in enumerate(collection.filtered):
                if item.name == request.follow:
                    collection.cursor = index
                    self.drill_down()
                    break
            else:
                logger.warning("%s %r not found", request.kind.value, request.follow)
        return True

    def load_initial(self, default_tenant: str = "") -> None:
        """Fetch tenants, then open ``default_tenant`` when it exists."""
        self.request(
            ResourceKind.TENANTS,
            (),
            Tenants(),
            sticky=True,
            follow=default_tenant or None,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def drill_down(self) -> None:
        store = self._state.store
        active = self._state.active_resource
        tenant = store.selected_tenant_name()
        namespace = store.selected_namespace_name()
        topic = store.selected_topic_name()

        if isinstance(active, Tenants):
            if tenant is not None:
                self.request(ResourceKind.NAMESPACES, (tenant,), Namespaces())
        elif isinstance(active, Namespaces):
            if tenant is not None and namespace is not None:
                self.request(ResourceKind.TOPICS, (tenant, namespace), Topics())
        elif isinstance(active, Topics):
            if tenant is not None and namespace is not None and topic is not None:
                self.request(
                    ResourceKind.SUBSCRIPTIONS, (tenant, namespace, topic), Subscriptions()
                )
        elif isinstance(active, Subscriptions):
            subscription = store.selected_subscription_name()
            if None not in (tenant, namespace, topic, subscription):
                self.request(
                    ResourceKind.CONSUMERS,
                    (tenant, namespace, topic, subscription),
                    Consumers(),
                )
        elif isinstance(active, (Consumers, Listening)):
            return

    def go_back(self) -> None:
        store = self._state.store
        active = self._state.active_resource
        tenant = store.selected_tenant_name()
        namespace = store.selected_namespace_name()
        topic = store.selected_topic_name()

        if isinstance(active, Tenants):
            return
        if isinstance(active, Namespaces):
            self.request(ResourceKind.TENANTS, (), Tenants(), sticky=True)
        elif isinstance(active, Topics):
            if tenant is not None:
                self.request(ResourceKind.NAMESPACES, (tenant,), Namespaces(), sticky=True)
        elif isinstance(active, Subscriptions):
            if tenant is not None and namespace is not None:
                self.request(ResourceKind.TOPICS, (tenant, namespace), Topics(), sticky=True)
        elif isinstance(active, Consumers):
            if None not in (tenant, namespace, topic):
                self.request(
                    ResourceKind.SUBSCRIPTIONS,
                    (tenant, namespace, topic),
                    Subscriptions(),
                    sticky=True,
                )
        elif isinstance(active, Listening):
            self.leave_listening()

    def leave_listening(self) -> None:
        """Stop the session and return to the cached topic list, then refresh it."""
        self._live_tail.stop()
        store = self._state.store
        store.messages.clear()
        self._state.reset_listening_panel()
        self._state.active_resource = Topics()
        tenant = store.selected_tenant_name()
        namespace = store.selected_namespace_name()
        if tenant is not None and namespace is not None:
            self.request(ResourceKind.TOPICS, (tenant, namespace), Topics(), sticky=True)

    def refresh_subscriptions(self) -> None:
        """Re-list subscriptions keeping search and selection, if still shown."""
        if not isinstance(self._state.active_resource, Subscriptions):
            return
        store = self._state.store
        scope = (
            store.selected_tenant_name(),
            store.selected_namespace_name(),
            store.selected_topic_name(),
        )
        if None in scope:
            return
        self.request(ResourceKind.SUBSCRIPTIONS, scope, Subscriptions(), sticky=True)

    def subscribe(self) -> None:
        if not isinstance(self._state.active_resource, Topics):
            return
        topic = self._state.store.selected_topic()
        if topic is not None:
            self._live_tail.start(topic)

    def subscription_target(self) -> SubscriptionTarget | None:
        """Address of the subscription an operation would act on right now."""
        store = self._state.store
        active = self._state.active_resource
        if isinstance(active, Subscriptions):
            subscription = store.selected_subscription_name()
        elif isinstance(active, Listening):
            subscription = active.subscription_name
        else:
            return None
        tenant = store.selected_tenant_name()
        namespace = store.selected_namespace_name()
        topic = store.selected_topic_name()
        if tenant is None or namespace is None or topic is None or subscription is None:
            return None
        return SubscriptionTarget(
            tenant=tenant, namespace=namespace, topic=topic, subscription=subscription
        )
