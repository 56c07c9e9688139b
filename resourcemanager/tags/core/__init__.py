"""Core components."""

from .exceptions import ConfigurationError, TagsError, TransportError

__all__ = [
    "TagsError",
    "TransportError",
    "ConfigurationError",
]
