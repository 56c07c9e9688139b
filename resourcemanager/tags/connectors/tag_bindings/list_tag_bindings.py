"""ListTagBindings endpoint definition and adapter.

GET /v3/tagBindings?parent=...&pageSize=...&pageToken=...
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from resourcemanager.tags.config import get_api_path_prefix
from resourcemanager.tags.core import TransportError
from resourcemanager.tags.models import ListTagBindingsRequest, TagBinding
from resourcemanager.tags.runtime.paging import Page
from resourcemanager.tags.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(request: ListTagBindingsRequest) -> str:
    """Build the tag bindings collection path."""
    return f"{get_api_path_prefix()}/tagBindings"


def build_query(request: ListTagBindingsRequest) -> dict[str, Any]:
    """Build query parameters; page_size is forwarded unclamped."""
    return request.to_query()


# Endpoint specification
SPEC = RestEndpointSpec(
    id="list_tag_bindings",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a ListTagBindings response into a Page."""

    def parse(self, response: Any, request: ListTagBindingsRequest) -> Page[TagBinding]:
        """Parse a ListTagBindings response.

        Args:
            response: Decoded JSON body ({"tagBindings": [...], "nextPageToken": "..."})
            request: Request that produced the response

        Returns:
            Page of TagBinding objects; both keys may be absent on an empty listing

        Raises:
            TransportError: If the body does not have the expected shape
        """
        if response is None:
            response = {}
        if not isinstance(response, dict):
            raise TransportError(
                f"Malformed ListTagBindings response for {request.parent}: "
                f"expected object, got {type(response).__name__}"
            )

        rows = response.get("tagBindings")
        if rows is None:
            rows = []
        if not isinstance(rows, list):
            raise TransportError(
                f"Malformed ListTagBindings response for {request.parent}: "
                "tagBindings is not a list"
            )

        token = response.get("nextPageToken")
        if token is not None and not isinstance(token, str):
            raise TransportError(
                f"Malformed ListTagBindings response for {request.parent}: "
                "nextPageToken is not a string"
            )

        try:
            items = [TagBinding.model_validate(row) for row in rows]
        except ValidationError as e:
            raise TransportError(
                f"Malformed tag binding in response for {request.parent}: {e}"
            ) from e

        return Page(items=items, next_page_token=token or None)
