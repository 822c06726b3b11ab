"""TLS termination module of HTTPS edges."""

from __future__ import annotations

from ..models import EndpointTlsTermination, EndpointTlsTerminationAtEdge
from ..options import Unset, require
from .base import CallBuilder, Service


class HttpsEdgeTlsTerminationReplaceCallBuilder(CallBuilder[EndpointTlsTermination]):
    """Unsent Replace call."""

    def module(
        self, module: EndpointTlsTerminationAtEdge | None | Unset
    ) -> HttpsEdgeTlsTerminationReplaceCallBuilder:
        self._set_body("module", module)
        return self


class HttpsEdgeTlsTerminationModule(Service):
    """Client for /edges/https/{id}/tls_termination."""

    @staticmethod
    def _path(id: str) -> str:
        return f"/edges/https/{require(id, 'id')}/tls_termination"

    def replace(self, id: str) -> HttpsEdgeTlsTerminationReplaceCallBuilder:
        return HttpsEdgeTlsTerminationReplaceCallBuilder(
            self._api_client, "PUT", self._path(id), EndpointTlsTermination
        )

    def get(self, id: str) -> CallBuilder[EndpointTlsTermination]:
        return CallBuilder(self._api_client, "GET", self._path(id), EndpointTlsTermination)

    def delete(self, id: str) -> CallBuilder[None]:
        return CallBuilder(self._api_client, "DELETE", self._path(id))
