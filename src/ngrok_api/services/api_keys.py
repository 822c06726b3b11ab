"""API keys service."""

from __future__ import annotations

from ..models import ApiKey, ApiKeyList
from ..options import Unset, require
from .base import CallBuilder, ListCallBuilder, Service


class ApiKeysCreateCallBuilder(CallBuilder[ApiKey]):
    """Unsent Create call."""

    def description(self, description: str | Unset) -> ApiKeysCreateCallBuilder:
        """Human-readable description of what uses the API key. Max 255 bytes."""
        self._set_body("description", description, nullable=False)
        return self

    def metadata(self, metadata: str | Unset) -> ApiKeysCreateCallBuilder:
        """Arbitrary user-defined data. Max 4096 bytes."""
        self._set_body("metadata", metadata, nullable=False)
        return self


class ApiKeysUpdateCallBuilder(CallBuilder[ApiKey]):
    """Unsent Update call."""

    def description(self, description: str | None | Unset) -> ApiKeysUpdateCallBuilder:
        self._set_body("description", description)
        return self

    def metadata(self, metadata: str | None | Unset) -> ApiKeysUpdateCallBuilder:
        self._set_body("metadata", metadata)
        return self


class ApiKeys(Service):
    """Client for the /api_keys resource.

    API Keys are used to authenticate to the ngrok API.
    """

    def create(self) -> ApiKeysCreateCallBuilder:
        """Create a new API key. The token is only returned by this call."""
        return ApiKeysCreateCallBuilder(self._api_client, "POST", "/api_keys", ApiKey)

    def delete(self, id: str) -> CallBuilder[None]:
        """Delete an API key by ID."""
        return CallBuilder(self._api_client, "DELETE", f"/api_keys/{require(id, 'id')}")

    def get(self, id: str) -> CallBuilder[ApiKey]:
        """Get the details of an API key by ID."""
        return CallBuilder(self._api_client, "GET", f"/api_keys/{require(id, 'id')}", ApiKey)

    def list(self) -> ListCallBuilder[ApiKeyList]:
        """List all API keys owned by this account."""
        return ListCallBuilder(self._api_client, "GET", "/api_keys", ApiKeyList)

    def update(self, id: str) -> ApiKeysUpdateCallBuilder:
        """Update attributes of an API key by ID."""
        return ApiKeysUpdateCallBuilder(
            self._api_client, "PATCH", f"/api_keys/{require(id, 'id')}", ApiKey
        )
