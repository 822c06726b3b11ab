"""Weighted backends service."""

from __future__ import annotations

from ..models import WeightedBackend, WeightedBackendList
from ..options import Unset, require
from .base import CallBuilder, ListCallBuilder, Service


class WeightedBackendsCreateCallBuilder(CallBuilder[WeightedBackend]):
    """Unsent Create call."""

    def description(self, description: str | Unset) -> WeightedBackendsCreateCallBuilder:
        self._set_body("description", description, nullable=False)
        return self

    def metadata(self, metadata: str | Unset) -> WeightedBackendsCreateCallBuilder:
        self._set_body("metadata", metadata, nullable=False)
        return self

    def backends(
        self, backends: dict[str, int] | None | Unset
    ) -> WeightedBackendsCreateCallBuilder:
        """Child backend IDs mapped to their weights [0-10000]."""
        self._set_body("backends", backends)
        return self


class WeightedBackendsUpdateCallBuilder(CallBuilder[WeightedBackend]):
    """Unsent Update call."""

    def description(self, description: str | None | Unset) -> WeightedBackendsUpdateCallBuilder:
        self._set_body("description", description)
        return self

    def metadata(self, metadata: str | None | Unset) -> WeightedBackendsUpdateCallBuilder:
        self._set_body("metadata", metadata)
        return self

    def backends(
        self, backends: dict[str, int] | None | Unset
    ) -> WeightedBackendsUpdateCallBuilder:
        self._set_body("backends", backends)
        return self


class WeightedBackends(Service):
    """Client for the /backends/weighted resource.

    A Weighted Backend balances traffic among the referenced backends. Traffic
    is assigned proportionally to each backend's weight.
    """

    def create(self) -> WeightedBackendsCreateCallBuilder:
        """Create a new Weighted backend."""
        return WeightedBackendsCreateCallBuilder(
            self._api_client, "POST", "/backends/weighted", WeightedBackend
        )

    def delete(self, id: str) -> CallBuilder[None]:
        """Delete a Weighted backend by ID."""
        return CallBuilder(
            self._api_client, "DELETE", f"/backends/weighted/{require(id, 'id')}"
        )

    def get(self, id: str) -> CallBuilder[WeightedBackend]:
        """Get detailed information about a Weighted backend by ID."""
        return CallBuilder(
            self._api_client, "GET", f"/backends/weighted/{require(id, 'id')}", WeightedBackend
        )

    def list(self) -> ListCallBuilder[WeightedBackendList]:
        """List all Weighted backends on this account."""
        return ListCallBuilder(
            self._api_client, "GET", "/backends/weighted", WeightedBackendList
        )

    def update(self, id: str) -> WeightedBackendsUpdateCallBuilder:
        """Update Weighted backend by ID."""
        return WeightedBackendsUpdateCallBuilder(
            self._api_client, "PATCH", f"/backends/weighted/{require(id, 'id')}", WeightedBackend
        )
