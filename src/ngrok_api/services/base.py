"""Shared plumbing for service call builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

from ..exceptions import InvalidArgumentError
from ..models import ListEnvelope
from ..options import UNSET, Unset, require
from ..pagination import Page

if TYPE_CHECKING:
    from ..client import NgrokApiClient

T = TypeVar("T")
ListT = TypeVar("ListT", bound=ListEnvelope)


class Service:
    """Base class for resource services."""

    def __init__(self, api_client: NgrokApiClient) -> None:
        self._api_client = require(api_client, "api_client")


class CallBuilder(Generic[T]):
    """State for one unsent API call.

    Subclasses add one chainable setter per optional parameter. Setters store
    values in ``_query`` or ``_body``; fields left UNSET are not sent.
    """

    def __init__(
        self,
        api_client: NgrokApiClient,
        method: str,
        path: str,
        response_type: type[BaseModel] | None = None,
    ) -> None:
        self._api_client = api_client
        self._method = method
        self._path = path
        self._response_type = response_type
        self._query: dict[str, Any] = {}
        self._body: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._method} {self._path})"

    def _set_body(self, name: str, value: Any, nullable: bool = True) -> None:
        if value is None and not nullable:
            raise InvalidArgumentError(f"{name} must not be None")
        self._body[name] = value

    def _set_query(self, name: str, value: Any) -> None:
        self._query[name] = value

    async def _send(self) -> Any:
        return await self._api_client.send_request(
            self._method,
            self._path,
            query_params=self._query,
            body=self._body,
            response_type=self._response_type,
        )

    async def call(self) -> T:
        """Initiate the API call."""
        return await self._send()

    def blocking_call(self) -> T:
        """Initiate the API call and block until it returns.

        Errors raised by the call are re-raised unchanged.
        """
        return self._api_client.run_blocking(self.call())


class ListCallBuilder(CallBuilder[Page[ListT]]):
    """Builder for paginated list calls, accepting ``before_id`` and ``limit``."""

    def before_id(self, before_id: str | None | Unset) -> ListCallBuilder[ListT]:
        """Only return items created before the item with this ID.

        Pass None or UNSET to clear.
        """
        self._set_query("before_id", before_id)
        return self

    def limit(self, limit: str | int | None | Unset) -> ListCallBuilder[ListT]:
        """Maximum number of items per page. Pass None or UNSET to clear."""
        self._set_query("limit", None if limit is None or limit is UNSET else str(limit))
        return self

    async def call(self) -> Page[ListT]:
        """Fetch the first page."""
        envelope = await self._send()
        return Page(self._api_client, envelope)
