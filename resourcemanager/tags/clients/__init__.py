"""Service clients."""

from .tag_bindings import TagBindingsClient

__all__ = ["TagBindingsClient"]
