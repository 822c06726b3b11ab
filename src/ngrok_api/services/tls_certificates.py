"""TLS certificates service.

TLS Certificates are pairs of x509 certificates and their matching private
key that can be used to terminate TLS traffic.
"""

from __future__ import annotations

from ..models import TlsCertificate, TlsCertificateList
from ..options import Unset, require
from .base import CallBuilder, ListCallBuilder, Service


class TlsCertificatesCreateCallBuilder(CallBuilder[TlsCertificate]):
    """Unsent Create call."""

    def description(self, description: str | Unset) -> TlsCertificatesCreateCallBuilder:
        """Human-readable description of this TLS certificate. Max 255 bytes."""
        self._set_body("description", description, nullable=False)
        return self

    def metadata(self, metadata: str | Unset) -> TlsCertificatesCreateCallBuilder:
        """Arbitrary user-defined data. Max 4096 bytes."""
        self._set_body("metadata", metadata, nullable=False)
        return self


class TlsCertificatesUpdateCallBuilder(CallBuilder[TlsCertificate]):
    """Unsent Update call."""

    def description(self, description: str | None | Unset) -> TlsCertificatesUpdateCallBuilder:
        self._set_body("description", description)
        return self

    def metadata(self, metadata: str | None | Unset) -> TlsCertificatesUpdateCallBuilder:
        self._set_body("metadata", metadata)
        return self


class TlsCertificates(Service):
    """Client for the /tls_certificates resource."""

    def create(
        self, certificate_pem: str, private_key_pem: str
    ) -> TlsCertificatesCreateCallBuilder:
        """Upload a new TLS certificate.

        Args:
            certificate_pem: Chain of PEM-encoded certificates, leaf first.
            private_key_pem: Private key for the certificate, PEM-encoded.
        """
        builder = TlsCertificatesCreateCallBuilder(
            self._api_client, "POST", "/tls_certificates", TlsCertificate
        )
        builder._set_body("certificate_pem", require(certificate_pem, "certificate_pem"))
        builder._set_body("private_key_pem", require(private_key_pem, "private_key_pem"))
        return builder

    def delete(self, id: str) -> CallBuilder[None]:
        """Delete a TLS certificate."""
        return CallBuilder(
            self._api_client, "DELETE", f"/tls_certificates/{require(id, 'id')}"
        )

    def get(self, id: str) -> CallBuilder[TlsCertificate]:
        """Get detailed information about a TLS certificate."""
        return CallBuilder(
            self._api_client, "GET", f"/tls_certificates/{require(id, 'id')}", TlsCertificate
        )

    def list(self) -> ListCallBuilder[TlsCertificateList]:
        """List all TLS certificates on this account."""
        return ListCallBuilder(self._api_client, "GET", "/tls_certificates", TlsCertificateList)

    def update(self, id: str) -> TlsCertificatesUpdateCallBuilder:
        """Update attributes of a TLS certificate by ID."""
        return TlsCertificatesUpdateCallBuilder(
            self._api_client, "PATCH", f"/tls_certificates/{require(id, 'id')}", TlsCertificate
        )
