"""Async HTTP client for the ngrok API."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ._sync import run_sync
from .auth import AuthProvider
from .config import API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from .exceptions import (
    ConnectionError,
    DeserializationError,
    TimeoutError,
    raise_for_status,
)
from .options import UNSET, drop_unset
from .services import (
    ApiKeys,
    Credentials,
    EndpointLoggingModule,
    EventSources,
    HttpsEdgeTlsTerminationModule,
    TlsCertificates,
    WeightedBackends,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")

_METHODS_WITHOUT_BODY = frozenset({"GET", "DELETE"})


def _encode(value: Any) -> Any:
    """Convert a body value to its JSON form."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_unset=True)
    return value


class NgrokApiClient:
    """Request dispatcher for the ngrok API.

    Executes one HTTP request per call and deserializes the JSON response into
    the expected model. Every service and page holds a reference to one of
    these; there is no module-level client.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_key: API key for authentication. If not provided, will be read
                from the NGROK_API_KEY env var.
            base_url: Base URL for the ngrok API.
            timeout: Default request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._auth = AuthProvider(api_key=api_key)
        # httpx connection pools are bound to the loop that created them
        self._clients: dict[asyncio.AbstractEventLoop, httpx.AsyncClient] = {}
        # blocking calls run their own loops on other threads
        self._clients_lock = threading.Lock()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Return the HTTP client for the running event loop, creating it on first use."""
        loop = asyncio.get_running_loop()
        with self._clients_lock:
            for stale in [other for other in self._clients if other.is_closed()]:
                # The pool cannot be closed without its loop; it is left to GC.
                self._clients.pop(stale, None)
                logger.debug("Dropped HTTP client of a closed event loop without aclose()")

            client = self._clients.get(loop)
            if client is None:
                client = httpx.AsyncClient(
                    base_url=self._base_url,
                    timeout=httpx.Timeout(self._timeout),
                    headers={
                        "User-Agent": USER_AGENT,
                        "Ngrok-Version": API_VERSION,
                        "Content-Type": "application/json",
                    },
                )
                self._clients[loop] = client
        return client

    async def close(self) -> None:
        """Close the HTTP client of the running event loop."""
        with self._clients_lock:
            client = self._clients.pop(asyncio.get_running_loop(), None)
        if client is not None:
            await client.aclose()

    def run_blocking(self, coro: Coroutine[Any, Any, T]) -> T:
        """Run a request coroutine to completion and release its connections."""

        async def run_and_release() -> T:
            try:
                return await coro
            finally:
                await self.close()

        return run_sync(run_and_release())

    async def send_request(
        self,
        method: str,
        path: str,
        query_params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        response_type: type[ModelT] | None = None,
    ) -> ModelT | None:
        """Make a request to the API.

        Args:
            method: HTTP method.
            path: API path, or an absolute URI such as a next_page_uri.
            query_params: Query parameters. UNSET and None values are left out.
            body: JSON body fields. UNSET values are left out, None is sent as null.
            response_type: Model to deserialize the response into, or None for
                operations without a response body.

        Returns:
            The deserialized response, or None.

        Raises:
            APIError: On API errors.
            ConnectionError: On connection errors.
            TimeoutError: On timeout.
            DeserializationError: If the response does not match response_type.
        """
        method = method.upper()
        params = {
            k: v for k, v in (query_params or {}).items() if v is not UNSET and v is not None
        }
        json_data = None
        if method not in _METHODS_WITHOUT_BODY:
            json_data = {k: _encode(v) for k, v in drop_unset(body or {}).items()}

        headers = self._auth.get_headers()
        client = await self._ensure_client()
        logger.debug(f"{method} {path}")

        try:
            response = await client.request(
                method,
                path,
                headers=headers,
                json=json_data,
                params=params or None,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                f"Request timed out after {self._timeout}s", self._timeout
            ) from e
        except httpx.ConnectError as e:
            raise ConnectionError(f"Cannot connect to ngrok API: {e}", e) from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Network request failed: {e}", e) from e

        if response.status_code >= 400:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            logger.warning(f"{method} {response.url} failed with status {response.status_code}")
            raise_for_status(
                response.status_code,
                error_data,
                reason=response.reason_phrase,
                retry_after=response.headers.get("Retry-After"),
            )

        if response_type is None or response.status_code == 204:
            return None

        try:
            return response_type.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise DeserializationError(
                f"Unexpected response for {method} {path}: expected {response_type.__name__}",
                e,
            ) from e


class Ngrok:
    """Async client for the ngrok API.

    This is the main entry point. It owns one dispatcher and exposes one
    service per API resource.

    Example:
        ```python
        import asyncio
        from ngrok_api import Ngrok

        async def main():
            async with Ngrok() as ngrok:
                credential = await ngrok.credentials.create().description("ci").call()
                print(credential.token)

                page = await ngrok.credentials.list().limit("50").call()
                async for credential in page:
                    print(credential.id)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        api_client: NgrokApiClient | None = None,
    ) -> None:
        """Initialize the ngrok client.

        Args:
            api_key: API key for authentication. If not provided, will be read
                from the NGROK_API_KEY env var.
            base_url: Base URL for the ngrok API.
            timeout: Default request timeout in seconds.
            api_client: Dispatcher to use instead of building one from the
                other arguments.
        """
        self._api_client = api_client or NgrokApiClient(
            api_key=api_key, base_url=base_url, timeout=timeout
        )
        self._api_keys = ApiKeys(self._api_client)
        self._credentials = Credentials(self._api_client)
        self._tls_certificates = TlsCertificates(self._api_client)
        self._event_sources = EventSources(self._api_client)
        self._weighted_backends = WeightedBackends(self._api_client)
        self._endpoint_logging_module = EndpointLoggingModule(self._api_client)
        self._https_edge_tls_termination_module = HttpsEdgeTlsTerminationModule(
            self._api_client
        )

    def __enter__(self) -> Ngrok:
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit sync context manager.

        Blocking calls release their connections as they return, so there is
        nothing left to close here.
        """

    async def __aenter__(self) -> Ngrok:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._api_client.close()

    @property
    def api_client(self) -> NgrokApiClient:
        return self._api_client

    @property
    def api_keys(self) -> ApiKeys:
        return self._api_keys

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def tls_certificates(self) -> TlsCertificates:
        return self._tls_certificates

    @property
    def event_sources(self) -> EventSources:
        return self._event_sources

    @property
    def weighted_backends(self) -> WeightedBackends:
        return self._weighted_backends

    @property
    def endpoint_logging_module(self) -> EndpointLoggingModule:
        return self._endpoint_logging_module

    @property
    def https_edge_tls_termination_module(self) -> HttpsEdgeTlsTerminationModule:
        return self._https_edge_tls_termination_module
