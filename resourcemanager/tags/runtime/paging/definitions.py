"""Paging data structures.

This module defines the containers exchanged between a page-fetch capability
and the pager: a single Page of results and the aggregated PagingResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class ContinuableRequest(Protocol):
    """Request that can be re-issued from a continuation token."""

    def with_page_token(self, page_token: str | None) -> ContinuableRequest: ...


@dataclass(frozen=True)
class Page(Generic[T]):
    """One server response.

    Attributes:
        items: Results in server-provided order (may be shorter than page_size)
        next_page_token: Opaque continuation token; None or "" on the final page
    """

    items: list[T] = field(default_factory=list)
    next_page_token: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class PagingResult(Generic[T]):
    """Result of draining a pager.

    Attributes:
        items: Concatenated items from every fetched page
        pages_fetched: Number of pages requested from the server
        total_items: Number of items aggregated
        next_page_token: Token left over when a page bound stopped iteration early
    """

    items: list[T]
    pages_fetched: int
    total_items: int = 0
    next_page_token: str | None = None
