"""Tag bindings REST endpoint registry."""

from __future__ import annotations

from resourcemanager.tags.runtime.rest import ResponseAdapter, RestEndpointSpec

from .list_tag_bindings import SPEC as ListTagBindingsSpec  # noqa: N811
from .list_tag_bindings import Adapter as ListTagBindingsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "list_tag_bindings": (ListTagBindingsSpec, ListTagBindingsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "list_tag_bindings")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = [
    "ListTagBindingsAdapter",
    "ListTagBindingsSpec",
    "get_endpoint_adapter",
    "get_endpoint_spec",
]
