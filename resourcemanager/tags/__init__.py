"""Resource Manager Tags - async client for listing tag bindings."""

from .clients import TagBindingsClient
from .config import ClientSettings
from .core import ConfigurationError, TagsError, TransportError
from .models import ListTagBindingsRequest, TagBinding
from .runtime.paging import AsyncPager, Page, PagingResult

__version__ = "0.1.0"

__all__ = [
    # Client
    "TagBindingsClient",
    "ClientSettings",
    # Models
    "ListTagBindingsRequest",
    "TagBinding",
    # Paging
    "AsyncPager",
    "Page",
    "PagingResult",
    # Exceptions
    "TagsError",
    "TransportError",
    "ConfigurationError",
]
