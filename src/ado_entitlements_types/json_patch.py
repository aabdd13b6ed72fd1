"""
JSON-Patch (RFC 6902) documents used by the update operations.

Update operations take a list of patch operations instead of a partial
model, e.g. replacing the license of a user:

    JsonPatchDocument.of(
        JsonPatchOperation.replace("/accessLevel", {"accountLicenseType": "express"}),
    )
"""

from enum import Enum
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class Operation(str, Enum):
    add = "add"
    remove = "remove"
    replace = "replace"
    move = "move"
    copy = "copy"
    test = "test"


class JsonPatchOperation(BaseModel):
    op: Operation = Field(description="The patch operation")
    path: str = Field(description="JSON pointer to the target location, e.g. /accessLevel")
    from_: Optional[str] = Field(None, alias="from", description="Source path for move and copy")
    value: Optional[Any] = Field(None, description="Value for add, replace and test")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    @classmethod
    def add(cls, path: str, value: Any) -> "JsonPatchOperation":
        return cls(op=Operation.add, path=path, value=value)

    @classmethod
    def replace(cls, path: str, value: Any) -> "JsonPatchOperation":
        return cls(op=Operation.replace, path=path, value=value)

    @classmethod
    def remove(cls, path: str) -> "JsonPatchOperation":
        return cls(op=Operation.remove, path=path)


class JsonPatchDocument(RootModel[List[JsonPatchOperation]]):
    root: List[JsonPatchOperation] = Field(default_factory=list)

    @classmethod
    def of(cls, *operations: JsonPatchOperation) -> "JsonPatchDocument":
        return cls(list(operations))

    def to_wire(self) -> List[dict]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __iter__(self) -> Iterator[JsonPatchOperation]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
