"""Event sources of an event subscription."""

from __future__ import annotations

from ..models import EventSource, EventSourceList
from ..options import Unset, require
from .base import CallBuilder, Service


class EventSourcesCreateCallBuilder(CallBuilder[EventSource]):
    """Unsent Create call."""

    def type(self, type: str | Unset) -> EventSourcesCreateCallBuilder:
        """Type of event for which an event subscription will trigger."""
        self._set_body("type", type, nullable=False)
        return self


class EventSources(Service):
    """Client for /event_subscriptions/{subscription_id}/sources."""

    @staticmethod
    def _sources_path(subscription_id: str) -> str:
        return f"/event_subscriptions/{require(subscription_id, 'subscription_id')}/sources"

    def create(self, subscription_id: str) -> EventSourcesCreateCallBuilder:
        """Add an additional type for which this event subscription will trigger."""
        return EventSourcesCreateCallBuilder(
            self._api_client, "POST", self._sources_path(subscription_id), EventSource
        )

    def delete(self, subscription_id: str, type: str) -> CallBuilder[None]:
        """Remove a type for which this event subscription will trigger."""
        path = f"{self._sources_path(subscription_id)}/{require(type, 'type')}"
        return CallBuilder(self._api_client, "DELETE", path)

    def get(self, subscription_id: str, type: str) -> CallBuilder[EventSource]:
        """Get the details for a given type that triggers for the given event subscription."""
        path = f"{self._sources_path(subscription_id)}/{require(type, 'type')}"
        return CallBuilder(self._api_client, "GET", path, EventSource)

    def list(self, subscription_id: str) -> CallBuilder[EventSourceList]:
        """List the types for which this event subscription will trigger."""
        return CallBuilder(
            self._api_client, "GET", self._sources_path(subscription_id), EventSourceList
        )

    def update(self, subscription_id: str, type: str) -> CallBuilder[EventSource]:
        """Update the type for which this event subscription will trigger."""
        path = f"{self._sources_path(subscription_id)}/{require(type, 'type')}"
        return CallBuilder(self._api_client, "PATCH", path, EventSource)
