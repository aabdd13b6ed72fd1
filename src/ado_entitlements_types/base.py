from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for every Member Entitlement Management payload.

    Fields are declared in snake_case and travel as camelCase on the wire.
    Unknown wire fields are kept so that newer service versions round-trip.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        use_enum_values=True,
    )

    def to_wire(self) -> Any:
        """Serialize to the JSON-compatible structure sent to the service."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QueryOptions(BaseModel):
    """
    Optional query parameters of a single operation.

    Each field is one query parameter; its alias is the exact wire name.
    Unset fields never reach the query string.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, frozen=True, extra="forbid")

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OperationResult(WireModel):
    errors: Optional[list] = Field(None, description="Error key/value pairs reported by the service")
    is_success: Optional[bool] = Field(None, description="True if the operation succeeded")
