"""Logging module of endpoint configurations."""

from __future__ import annotations

from ..models import EndpointLogging, EndpointLoggingMutate
from ..options import Unset, require
from .base import CallBuilder, Service


class EndpointLoggingModuleReplaceCallBuilder(CallBuilder[EndpointLogging]):
    """Unsent Replace call."""

    def module(
        self, module: EndpointLoggingMutate | None | Unset
    ) -> EndpointLoggingModuleReplaceCallBuilder:
        self._set_body("module", module)
        return self


class EndpointLoggingModule(Service):
    """Client for /endpoint_configurations/{id}/logging."""

    @staticmethod
    def _path(id: str) -> str:
        return f"/endpoint_configurations/{require(id, 'id')}/logging"

    def replace(self, id: str) -> EndpointLoggingModuleReplaceCallBuilder:
        return EndpointLoggingModuleReplaceCallBuilder(
            self._api_client, "PUT", self._path(id), EndpointLogging
        )

    def get(self, id: str) -> CallBuilder[EndpointLogging]:
        return CallBuilder(self._api_client, "GET", self._path(id), EndpointLogging)

    def delete(self, id: str) -> CallBuilder[None]:
        return CallBuilder(self._api_client, "DELETE", self._path(id))
