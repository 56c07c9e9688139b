"""TagBinding data model."""

from pydantic import BaseModel, ConfigDict, Field


class TagBinding(BaseModel):
    """Attachment of a TagValue to a cloud resource."""

    name: str | None = None
    parent: str | None = None
    tag_value: str | None = Field(default=None, alias="tagValue")
    tag_value_namespaced_name: str | None = Field(default=None, alias="tagValueNamespacedName")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> str:
        """Serialize with wire (camelCase) field names, dropping unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
