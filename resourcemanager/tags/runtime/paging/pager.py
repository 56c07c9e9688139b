"""Lazy iteration over token-paginated list endpoints.

This module provides the AsyncPager class that turns a page-fetch function
into a single forward-only async sequence of items, issuing follow-up
requests with continuation tokens until the server stops returning one.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from time import perf_counter
from typing import Any, Generic

from .definitions import ContinuableRequest, Page, PagingResult, T
from .telemetry import log_page_error, log_page_fetched, log_paging_complete

FetchPage = Callable[[Any], Awaitable[Page[T]]]


class AsyncPager(Generic[T]):
    """Forward-only async sequence of items spanning every page of a listing.

    ``async for item in pager`` yields items; ``pager.pages()`` yields whole
    pages. A pager can be consumed once. To start over, build a new pager from
    the original request.

    Only a missing or empty ``next_page_token`` ends the listing; a page
    shorter than the requested size does not. Fetch errors propagate
    unchanged after the items of earlier pages have been yielded.
    """

    def __init__(
        self,
        request: ContinuableRequest,
        fetch_page: FetchPage[T],
        *,
        max_pages: int | None = None,
        endpoint_id: str = "unknown",
    ) -> None:
        """Initialize pager.

        Args:
            request: Initial request; its page token (normally unset) is honoured
            fetch_page: Async function that takes a request and returns a Page
            max_pages: Optional bound on pages to fetch (None = until exhausted)
            endpoint_id: Identifier used in telemetry

        Raises:
            ValueError: If max_pages is not positive
        """
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")

        self._request = request
        self._fetch_page = fetch_page
        self._max_pages = max_pages
        self._endpoint_id = endpoint_id
        self._started = False
        self._pages_fetched = 0
        self._next_page_token: str | None = None

    @property
    def request(self) -> ContinuableRequest:
        """The initial request this pager was built from."""
        return self._request

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def next_page_token(self) -> str | None:
        """Token of the last fetched page (None once the listing is exhausted)."""
        return self._next_page_token

    async def pages(self) -> AsyncIterator[Page[T]]:
        """Iterate over raw pages.

        Yields:
            Each page in server order

        Raises:
            RuntimeError: If this pager has already been iterated
        """
        if self._started:
            raise RuntimeError("Pager has already been iterated; create a new pager to restart")
        self._started = True

        request = self._request
        total_items = 0

        while True:
            if self._max_pages is not None and self._pages_fetched >= self._max_pages:
                log_paging_complete(
                    endpoint_id=self._endpoint_id,
                    pages_fetched=self._pages_fetched,
                    total_items=total_items,
                    truncated=True,
                )
                return

            page_index = self._pages_fetched
            page_start = perf_counter()
            try:
                page = await self._fetch_page(request)
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=page_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            self._pages_fetched += 1
            self._next_page_token = page.next_page_token or None
            total_items += len(page.items)

            log_page_fetched(
                endpoint_id=self._endpoint_id,
                page_index=page_index,
                item_count=len(page.items),
                has_next=page.has_next,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            yield page

            if not page.has_next:
                break

            request = request.with_page_token(page.next_page_token)

        log_paging_complete(
            endpoint_id=self._endpoint_id,
            pages_fetched=self._pages_fetched,
            total_items=total_items,
        )

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iter_items()

    async def _iter_items(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.items:
                yield item

    async def collect(self) -> PagingResult[T]:
        """Drain the pager into memory.

        Returns:
            PagingResult with every item and the number of pages fetched
        """
        items: list[T] = []
        async for item in self:
            items.append(item)

        return PagingResult(
            items=items,
            pages_fetched=self._pages_fetched,
            total_items=len(items),
            next_page_token=self._next_page_token,
        )
