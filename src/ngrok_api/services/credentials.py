"""Tunnel credentials service.

Tunnel Credentials are ngrok agent authtokens. They authorize the ngrok agent
to connect to the ngrok service as your account.
"""

from __future__ import annotations

from ..models import Credential, CredentialList
from ..options import Unset, require
from .base import CallBuilder, ListCallBuilder, Service


class CredentialsCreateCallBuilder(CallBuilder[Credential]):
    """Unsent Create call."""

    def description(self, description: str | Unset) -> CredentialsCreateCallBuilder:
        """Human-readable description of who or what will use the credential. Max 255 bytes."""
        self._set_body("description", description, nullable=False)
        return self

    def metadata(self, metadata: str | Unset) -> CredentialsCreateCallBuilder:
        """Arbitrary user-defined machine-readable data. Max 4096 bytes."""
        self._set_body("metadata", metadata, nullable=False)
        return self

    def acl(self, acl: list[str] | None | Unset) -> CredentialsCreateCallBuilder:
        """ACL rules, e.g. ``bind:*.example.com``. Unset means no restrictions."""
        self._set_body("acl", acl)
        return self


class CredentialsUpdateCallBuilder(CallBuilder[Credential]):
    """Unsent Update call. Only fields that were set are sent."""

    def description(self, description: str | None | Unset) -> CredentialsUpdateCallBuilder:
        self._set_body("description", description)
        return self

    def metadata(self, metadata: str | None | Unset) -> CredentialsUpdateCallBuilder:
        self._set_body("metadata", metadata)
        return self

    def acl(self, acl: list[str] | None | Unset) -> CredentialsUpdateCallBuilder:
        self._set_body("acl", acl)
        return self


class Credentials(Service):
    """Client for the /credentials resource."""

    def create(self) -> CredentialsCreateCallBuilder:
        """Create a new tunnel authtoken credential.

        The response to this call is the only time the generated token is
        available.
        """
        return CredentialsCreateCallBuilder(self._api_client, "POST", "/credentials", Credential)

    def delete(self, id: str) -> CallBuilder[None]:
        """Delete a tunnel authtoken credential by ID."""
        return CallBuilder(self._api_client, "DELETE", f"/credentials/{require(id, 'id')}")

    def get(self, id: str) -> CallBuilder[Credential]:
        """Get detailed information about a tunnel authtoken credential."""
        return CallBuilder(
            self._api_client, "GET", f"/credentials/{require(id, 'id')}", Credential
        )

    def list(self) -> ListCallBuilder[CredentialList]:
        """List all tunnel authtoken credentials on this account."""
        return ListCallBuilder(self._api_client, "GET", "/credentials", CredentialList)

    def update(self, id: str) -> CredentialsUpdateCallBuilder:
        """Update attributes of a tunnel authtoken credential by ID."""
        return CredentialsUpdateCallBuilder(
            self._api_client, "PATCH", f"/credentials/{require(id, 'id')}", Credential
        )
