"""Resource store holding the six filterable collections."""

from __future__ import annotations

from pulsarhawk.constants.enums import ResourceKind
from pulsarhawk.models.resources import (
    Consumer,
    Message,
    Namespace,
    Subscription,
    Tenant,
    Topic,
)
from pulsarhawk.models.state.active_resource import (
    ActiveResource,
    Consumers,
    Listening,
    Namespaces,
    Subscriptions,
    Tenants,
    Topics,
)
from pulsarhawk.models.state.filterable import (
    FilterableCollection,
    MessageCollection,
)


class ResourceStore:
    """All resource collections plus the selection accessors used to scope calls."""

    def __init__(self) -> None:
        self.tenants: FilterableCollection[Tenant] = FilterableCollection()
        self.namespaces: FilterableCollection[Namespace] = FilterableCollection()
        self.topics: FilterableCollection[Topic] = FilterableCollection()
        self.subscriptions: FilterableCollection[Subscription] = FilterableCollection()
        self.consumers: FilterableCollection[Consumer] = FilterableCollection()
        self.messages = MessageCollection()

    def collection(self, kind: ResourceKind) -> FilterableCollection:
        if kind is ResourceKind.TENANTS:
            return self.tenants
        if kind is ResourceKind.NAMESPACES:
            return self.namespaces
        if kind is ResourceKind.TOPICS:
            return self.topics
        if kind is ResourceKind.SUBSCRIPTIONS:
            return self.subscriptions
        if kind is ResourceKind.CONSUMERS:
            return self.consumers
        if kind is ResourceKind.MESSAGES:
            return self.messages
        raise ValueError(f"Unknown resource kind: {kind!r}")

    def active_collection(self, active: ActiveResource) -> FilterableCollection:
        """Collection whose cursor and search are live for ``active``."""
        return self.collection(kind_of(active))

    # ------------------------------------------------------------------
    # Selection accessors
    # ------------------------------------------------------------------

    def selected_tenant(self) -> Tenant | None:
        return self.tenants.selected()

    def selected_namespace(self) -> Namespace | None:
        return self.namespaces.selected()

    def selected_topic(self) -> Topic | None:
        return self.topics.selected()

    def selected_subscription(self) -> Subscription | None:
        return self.subscriptions.selected()

    def selected_consumer(self) -> Consumer | None:
        return self.consumers.selected()

    def selected_message(self) -> Message | None:
        return self.messages.selected()

    def selected_tenant_name(self) -> str | None:
        tenant = self.selected_tenant()
        return tenant.name if tenant else None

    def selected_namespace_name(self) -> str | None:
        namespace = self.selected_namespace()
        return namespace.name if namespace else None

    def selected_topic_name(self) -> str | None:
        topic = self.selected_topic()
        return topic.name if topic else None

    def selected_subscription_name(self) -> str | None:
        subscription = self.selected_subscription()
        return subscription.name if subscription else None


def kind_of(active: ActiveResource) -> ResourceKind:
    """Map an active resource to the collection it browses."""
    if isinstance(active, Tenants):
        return ResourceKind.TENANTS
    if isinstance(active, Namespaces):
        return ResourceKind.NAMESPACES
    if isinstance(active, Topics):
        return ResourceKind.TOPICS
    if isinstance(active, Subscriptions):
        return ResourceKind.SUBSCRIPTIONS
    if isinstance(active, Consumers):
        return ResourceKind.CONSUMERS
    if isinstance(active, Listening):
        return ResourceKind.MESSAGES
    raise TypeError(f"Unknown active resource: {active!r}")
