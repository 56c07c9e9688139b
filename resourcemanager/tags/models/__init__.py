"""Data models for Resource Manager tag resources.

Architecture:
    This module exports the Pydantic v2 models used by the client. All models
    are immutable (frozen=True) so a request, once issued, cannot change
    underneath a pager that is still iterating over it.

Design Decisions:
    - Pydantic v2: Type validation, alias handling for camelCase wire names
    - Frozen models: Continuation requests are derived copies, never mutations
    - Unknown response fields are ignored so newer server fields do not break parsing

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
    - runtime.paging.Page: Page container produced by the endpoint adapter
"""

from .request import ListTagBindingsRequest
from .tag_binding import TagBinding

__all__ = [
    "ListTagBindingsRequest",
    "TagBinding",
]
