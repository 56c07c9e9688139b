"""Structured logging for paging operations.

This module provides telemetry hooks for the pager, emitting structured logs
for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    item_count: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page
        item_count: Number of items in the page
        has_next: Whether the page carried a continuation token
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched endpoint=%s page=%d items=%d has_next=%s latency_ms=%s",
        endpoint_id,
        page_index,
        item_count,
        has_next,
        "-" if latency_ms is None else f"{latency_ms:.1f}",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "item_count": item_count,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_paging_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    total_items: int,
    truncated: bool = False,
) -> None:
    """Log completion of a listing.

    Args:
        endpoint_id: Endpoint identifier
        pages_fetched: Total number of pages fetched
        total_items: Total number of items yielded
        truncated: Whether a page bound stopped the listing before the last page
    """
    logger.info(
        "paging_complete endpoint=%s pages=%d items=%d truncated=%s",
        endpoint_id,
        pages_fetched,
        total_items,
        truncated,
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "total_items": total_items,
            "truncated": truncated,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "TransportError")
        error_message: Error message
    """
    logger.error(
        "page_error endpoint=%s page=%d %s: %s",
        endpoint_id,
        page_index,
        error_type,
        error_message,
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
