from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class Record(BaseModel):
    """One tenant's stored document"""

    model_config = ConfigDict(extra="allow")

    id: JsonValue
    """Main key, kept as stored (including the empty string)"""
    data: JsonValue = Field(default_factory=dict)
    """Field mapping, or whatever a full `data` section was replaced with"""

    @classmethod
    def from_tree(cls, tree: dict[str, Any]) -> "Record":
        return cls.model_validate(tree)

    def to_tree(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
