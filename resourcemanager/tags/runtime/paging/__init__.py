"""Generic paging layer for token-paginated list endpoints.

Architecture:
    The paging layer consists of:
    - definitions.py: Page and PagingResult containers
    - pager.py: AsyncPager, the lazy cross-page item sequence
    - telemetry.py: Structured logging

Usage:
    A client supplies an initial request and an async function fetching one
    page for a request. The pager re-invokes that function with the previous
    page's continuation token until a page arrives without one.
"""

from __future__ import annotations

from .definitions import ContinuableRequest, Page, PagingResult
from .pager import AsyncPager, FetchPage

__all__ = [
    "AsyncPager",
    "ContinuableRequest",
    "FetchPage",
    "Page",
    "PagingResult",
]
