"""Runtime components: paging and REST transport."""

from .paging import AsyncPager, Page, PagingResult
from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "AsyncPager",
    "Page",
    "PagingResult",
    "HTTPClient",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
