"""Application state owned by the dispatcher, and its render snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field

from pulsarhawk.constants.enums import SelectedPanel
from pulsarhawk.constants.values import APP_VERSION
from pulsarhawk.models.state.active_resource import ActiveResource, Tenants
from pulsarhawk.models.state.filterable import CollectionView
from pulsarhawk.models.state.modals import ConfirmationModal, InputModal, Notification
from pulsarhawk.models.state.resource_store import ResourceStore


@dataclass
class AppState:
    """Single mutable state object.

    Only the dispatcher writes to it; producers talk to the dispatcher through
    the event channel.
    """

    cluster_name: str = ""
    cluster_url: str = ""
    active_resource: ActiveResource = field(default_factory=Tenants)
    store: ResourceStore = field(default_factory=ResourceStore)
    confirmation: ConfirmationModal | None = None
    input_modal: InputModal | None = None
    notification: Notification | None = None
    panel: SelectedPanel = SelectedPanel.LIST
    scroll_offset: int = 0
    version: str = APP_VERSION
    latest_version: str | None = None
    pending_fetches: int = 0

    @property
    def is_capturing_input(self) -> bool:
        """True while typed characters belong to a dialog or search box."""
        if self.input_modal is not None:
            return True
        return self.store.active_collection(self.active_resource).is_capturing

    def reset_listening_panel(self) -> None:
        self.panel = SelectedPanel.LIST
        self.scroll_offset = 0

    def snapshot(self) -> DrawState:
        store = self.store
        input_modal = None
        if self.input_modal is not None:
            input_modal = InputModal(
                message=self.input_modal.message,
                value=self.input_modal.value,
                numeric_only=self.input_modal.numeric_only,
                target=self.input_modal.target,
            )
        return DrawState(
            cluster_name=self.cluster_name,
            cluster_url=self.cluster_url,
            active_resource=self.active_resource,
            tenants=store.tenants.snapshot(),
            namespaces=store.namespaces.snapshot(),
            topics=store.topics.snapshot(),
            subscriptions=store.subscriptions.snapshot(),
            consumers=store.consumers.snapshot(),
            messages=store.messages.snapshot(),
            selected_tenant=store.selected_tenant_name(),
            selected_namespace=store.selected_namespace_name(),
            selected_topic=store.selected_topic_name(),
            selected_subscription=store.selected_subscription_name(),
            confirmation=self.confirmation,
            input_modal=input_modal,
            notification=self.notification,
            panel=self.panel,
            scroll_offset=self.scroll_offset,
            version=self.version,
            latest_version=self.latest_version,
            loading=self.pending_fetches > 0,
        )


@dataclass(frozen=True, slots=True)
class DrawState:
    """Immutable copy of everything the renderer needs for one frame."""

    cluster_name: str
    cluster_url: str
    active_resource: ActiveResource
    tenants: CollectionView
    namespaces: CollectionView
    topics: CollectionView
    subscriptions: CollectionView
    consumers: CollectionView
    messages: CollectionView
    selected_tenant: str | None
    selected_namespace: str | None
    selected_topic: str | None
    selected_subscription: str | None
    confirmation: ConfirmationModal | None
    input_modal: InputModal | None
    notification: Notification | None
    panel: SelectedPanel
    scroll_offset: int
    version: str
    latest_version: str | None
    loading: bool = False
