"""Cursor-based pagination over list endpoints."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .models import ListEnvelope

if TYPE_CHECKING:
    from .client import NgrokApiClient

logger = logging.getLogger(__name__)

ListT = TypeVar("ListT", bound=ListEnvelope)


class Page(Generic[ListT]):
    """One page of a list endpoint's results.

    A page never changes once built. ``next()`` fetches the following page
    from the envelope's ``next_page_uri`` and returns it as a new ``Page``,
    or returns None when there are no more pages.

    Example:
        ```python
        page = await ngrok.credentials.list().limit("100").call()
        while page is not None:
            for credential in page.current():
                print(credential.id)
            page = await page.next()
        ```
    """

    def __init__(self, api_client: NgrokApiClient, page: ListT) -> None:
        self._api_client = api_client
        self._page = page

    def __repr__(self) -> str:
        return f"Page({type(self._page).__name__}, items={len(self.current())}, has_more={self.has_more})"

    @property
    def page(self) -> ListT:
        """The list envelope held by this page."""
        return self._page

    @property
    def next_page_uri(self) -> str | None:
        return self._page.next_page_uri

    @property
    def has_more(self) -> bool:
        """True if another page can be fetched."""
        return self._page.next_page_uri is not None

    def current(self) -> list[Any]:
        """Items in this page. Never performs I/O."""
        return self._page.items

    async def next(self) -> Page[ListT] | None:
        """Fetch the next page.

        The next_page_uri is requested as-is, without extra query parameters.
        A failed fetch raises the dispatcher's error and leaves this page
        untouched, so calling next() again repeats the same request.

        Returns:
            The next page, or None if this is the last page.
        """
        uri = self._page.next_page_uri
        if uri is None:
            return None

        logger.debug(f"Fetching next page: {uri}")
        envelope = await self._api_client.send_request(
            "GET", uri, response_type=type(self._page)
        )
        return Page(self._api_client, envelope)

    def blocking_next(self) -> Page[ListT] | None:
        """Fetch the next page and block until it returns."""
        if not self.has_more:
            return None
        return self._api_client.run_blocking(self.next())

    async def __aiter__(self) -> AsyncIterator[Any]:
        """Iterate over the items of this page and every page after it."""
        page: Page[ListT] | None = self
        while page is not None:
            for item in page.current():
                yield item
            page = await page.next()

    def blocking_iter(self) -> Iterator[Any]:
        """Iterate over the items of this page and every page after it, blocking."""
        page: Page[ListT] | None = self
        while page is not None:
            yield from page.current()
            page = page.blocking_next()
