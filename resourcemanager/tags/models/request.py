"""ListTagBindings request model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ListTagBindingsRequest(BaseModel):
    """Request for one page of tag bindings under a parent resource.

    ``page_size`` is not range-checked: the server clamps it (at most 300,
    100 when unset) and zero or negative values are forwarded as given.
    """

    parent: str = Field(..., min_length=1)
    page_size: int | None = None
    page_token: str | None = None

    model_config = ConfigDict(frozen=True)

    def with_page_token(self, page_token: str | None) -> ListTagBindingsRequest:
        """Return a copy of this request continuing from ``page_token``."""
        return self.model_copy(update={"page_token": page_token})

    def to_query(self) -> dict[str, Any]:
        """Render wire query parameters, omitting unset fields."""
        query: dict[str, Any] = {"parent": self.parent}
        if self.page_size is not None:
            query["pageSize"] = self.page_size
        if self.page_token:
            query["pageToken"] = self.page_token
        return query
