"""Pydantic models for ngrok API resources."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Ref(BaseModel):
    """Reference to another API resource."""

    id: str = Field(..., description="Resource identifier")
    uri: str = Field(..., description="URI of the resource")


class ListEnvelope(BaseModel):
    """One page of list results.

    Subclasses name the wire field holding the page's items in ``items_field``.
    """

    items_field: ClassVar[str] = ""

    uri: str = Field(..., description="URI of this list API resource")
    next_page_uri: str | None = Field(None, description="URI of the next page, or null")

    @property
    def items(self) -> list[Any]:
        """Items held in this page."""
        return getattr(self, self.items_field)


# ==================== API KEYS ====================


class ApiKey(BaseModel):
    """API key resource."""

    id: str = Field(..., description="Unique API key resource identifier")
    uri: str = Field(..., description="URI to the API resource of this API key")
    description: str = Field(default="", description="Human-readable description")
    metadata: str = Field(default="", description="Arbitrary user-defined data")
    created_at: datetime = Field(..., description="Creation timestamp, RFC 3339")
    token: str | None = Field(
        None, description="The bearer token, only present in the create response"
    )


class ApiKeyList(ListEnvelope):
    """Page of API keys."""

    items_field: ClassVar[str] = "keys"

    keys: list[ApiKey] = Field(default_factory=list, description="The page of API keys")


# ==================== CREDENTIALS ====================


class Credential(BaseModel):
    """Tunnel credential (ngrok agent authtoken)."""

    id: str = Field(..., description="Unique tunnel credential resource identifier")
    uri: str = Field(..., description="URI of the tunnel credential API resource")
    created_at: datetime = Field(..., description="Creation timestamp, RFC 3339")
    description: str = Field(default="", description="Who or what uses the credential")
    metadata: str = Field(default="", description="Arbitrary user-defined data")
    token: str | None = Field(
        None, description="The authtoken, only present in the create response"
    )
    acl: list[str] = Field(default_factory=list, description="ACL bind rules")


class CredentialList(ListEnvelope):
    """Page of tunnel credentials."""

    items_field: ClassVar[str] = "credentials"

    credentials: list[Credential] = Field(
        default_factory=list, description="The page of tunnel credentials"
    )


# ==================== TLS CERTIFICATES ====================


class TlsCertificateSANs(BaseModel):
    """Subject alternative names of a TLS certificate."""

    dns_names: list[str] = Field(default_factory=list, description="DNS names")
    ips: list[str] = Field(default_factory=list, description="IP addresses")


class TlsCertificate(BaseModel):
    """An x509 certificate and its matching private key."""

    id: str = Field(..., description="Unique identifier for this TLS certificate")
    uri: str = Field(..., description="URI of the TLS certificate API resource")
    created_at: datetime = Field(..., description="Creation timestamp, RFC 3339")
    description: str = Field(default="", description="Human-readable description")
    metadata: str = Field(default="", description="Arbitrary user-defined data")
    certificate_pem: str = Field(..., description="Chain of PEM certificates, leaf first")
    subject_common_name: str = Field(default="", description="Subject common name")
    subject_alternative_names: TlsCertificateSANs = Field(
        default_factory=TlsCertificateSANs, description="Subject alternative names"
    )
    issued_at: datetime | None = Field(None, description="When the certificate was issued")
    not_before: datetime = Field(..., description="Start of the validity window")
    not_after: datetime = Field(..., description="End of the validity window")
    key_usages: list[str] = Field(default_factory=list, description="Key usages")
    extended_key_usages: list[str] = Field(
        default_factory=list, description="Extended key usages"
    )
    private_key_type: str = Field(default="", description="rsa, ecdsa or ed25519")
    issuer_common_name: str = Field(default="", description="Issuer common name")
    serial_number: str = Field(default="", description="Serial number")
    subject_organization: str = Field(default="", description="Subject organization")
    subject_organizational_unit: str = Field(default="", description="Subject OU")
    subject_locality: str = Field(default="", description="Subject locality")
    subject_province: str = Field(default="", description="Subject province")
    subject_country: str = Field(default="", description="Subject country")


class TlsCertificateList(ListEnvelope):
    """Page of TLS certificates."""

    items_field: ClassVar[str] = "tls_certificates"

    tls_certificates: list[TlsCertificate] = Field(
        default_factory=list, description="The page of TLS certificates"
    )


# ==================== EVENT SOURCES ====================


class EventSource(BaseModel):
    """Event type that triggers an event subscription."""

    type: str = Field(..., description="Type of event")
    uri: str = Field(..., description="URI of the event source API resource")


class EventSourceList(BaseModel):
    """All event sources of a subscription (not paginated)."""

    sources: list[EventSource] = Field(default_factory=list, description="Event sources")
    uri: str = Field(..., description="URI of the event sources list")


# ==================== WEIGHTED BACKENDS ====================


class WeightedBackend(BaseModel):
    """Backend that balances traffic across child backends by weight."""

    id: str = Field(..., description="Unique identifier for this weighted backend")
    uri: str = Field(..., description="URI of the weighted backend API resource")
    created_at: datetime = Field(..., description="Creation timestamp, RFC 3339")
    description: str = Field(default="", description="Human-readable description")
    metadata: str = Field(default="", description="Arbitrary user-defined data")
    backends: dict[str, int] = Field(
        default_factory=dict, description="Child backend IDs mapped to weights [0-10000]"
    )


class WeightedBackendList(ListEnvelope):
    """Page of weighted backends."""

    items_field: ClassVar[str] = "backends"

    backends: list[WeightedBackend] = Field(
        default_factory=list, description="The page of weighted backends"
    )


# ==================== ENDPOINT MODULES ====================


class EndpointLogging(BaseModel):
    """Logging module attached to an endpoint configuration."""

    enabled: bool | None = Field(None, description="Whether the module is enabled")
    event_streams: list[Ref] = Field(
        default_factory=list, description="Event streams receiving the logs"
    )


class EndpointLoggingMutate(BaseModel):
    """Logging module settings sent on replace.

    Only fields explicitly passed to the constructor are serialized.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool | None = Field(None, description="Whether the module is enabled")
    event_streams: list[str] = Field(
        default_factory=list, description="IDs of event streams receiving the logs"
    )


class EndpointTlsTermination(BaseModel):
    """TLS termination module of an HTTPS edge."""

    enabled: bool | None = Field(None, description="Whether the module is enabled")
    terminate_at: str = Field(default="", description="Where TLS is terminated")
    min_version: str | None = Field(None, description="Minimum accepted TLS version")


class EndpointTlsTerminationAtEdge(BaseModel):
    """TLS termination settings sent on replace.

    Only fields explicitly passed to the constructor are serialized.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool | None = Field(None, description="Whether the module is enabled")
    min_version: str | None = Field(None, description="Minimum accepted TLS version")
