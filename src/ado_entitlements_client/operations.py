"""
Operation descriptors and the Member Entitlement Management catalog.

Every endpoint is described once, as data, and executed by the generic
dispatcher in ``ado_entitlements_client.http``. Adding an endpoint means
adding a row to OPERATIONS, not writing a new request function.
"""

from typing import Any, Dict, FrozenSet, Optional, Tuple, Type
import string

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ado_entitlements_types import endpoints
from ado_entitlements_types.base import QueryOptions
from ado_entitlements_types.group_entitlements import (
    GroupEntitlement,
    GroupEntitlementAddOptions,
    GroupEntitlementDeleteOptions,
    GroupEntitlementList,
    GroupEntitlementOperationReference,
    GroupEntitlementUpdateOptions,
)
from ado_entitlements_types.json_patch import JsonPatchDocument
from ado_entitlements_types.members import GroupMembersQuery
from ado_entitlements_types.summary import UserEntitlementSummaryQuery, UsersSummary
from ado_entitlements_types.user_entitlements import (
    PagedGraphMemberList,
    UserEntitlement,
    UserEntitlementOperationReference,
    UserEntitlementSearchQuery,
    UserEntitlementsPatchResponse,
    UserEntitlementsPostResponse,
    UserEntitlementsUpdateOptions,
)


class OperationDescriptor(BaseModel):
    """Immutable description of one REST operation."""

    name: str = Field(description="Catalog key, e.g. group_entitlements.list")
    method: str = Field(description="HTTP method")
    path: str = Field(description="Path template relative to <endpoint>/<organization>/_apis/")
    query_model: Optional[Type[QueryOptions]] = Field(None, description="Optional query parameters")
    body_model: Optional[Type[BaseModel]] = Field(None, description="Request body type, None for no body")
    content_type: Optional[str] = Field(None, description="Content type of the request body")
    success_status: FrozenSet[int] = Field(default=frozenset({200}), description="Declared success codes")
    response_model: Optional[Type[BaseModel]] = Field(None, description="Response type, None for no content")
    api_version: str = endpoints.API_VERSION
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_body(self) -> "OperationDescriptor":
        if self.body_model is not None and self.content_type is None:
            raise ValueError(f"{self.name}: an operation with a body needs a content type")
        if not self.success_status:
            raise ValueError(f"{self.name}: at least one success status is required")
        return self

    @property
    def path_params(self) -> Tuple[str, ...]:
        """Names of the placeholders in the path template, in order."""
        return tuple(
            field_name
            for _, field_name, _, _ in string.Formatter().parse(self.path)
            if field_name
        )

    @property
    def has_body(self) -> bool:
        return self.body_model is not None

    def format_path(self, path_params: Dict[str, Any]) -> str:
        """
        Substitute the path parameters into the template.

        Raises:
            ValueError: If a required parameter is missing, empty or unexpected
        """
        expected = self.path_params
        missing = [name for name in expected if not path_params.get(name)]
        if missing:
            raise ValueError(f"{self.name}: missing path parameter(s): {', '.join(missing)}")
        unexpected = set(path_params) - set(expected)
        if unexpected:
            raise ValueError(f"{self.name}: unexpected path parameter(s): {', '.join(sorted(unexpected))}")
        return self.path.format(**{name: str(path_params[name]) for name in expected})


def _json(model: Type[BaseModel]) -> Dict[str, Any]:
    return {"body_model": model, "content_type": endpoints.JSON_CONTENT_TYPE}


def _json_patch() -> Dict[str, Any]:
    return {"body_model": JsonPatchDocument, "content_type": endpoints.JSON_PATCH_CONTENT_TYPE}


_CATALOG = (
    # Group entitlements
    OperationDescriptor(
        name="group_entitlements.list",
        method="GET",
        path=endpoints.GROUP_ENTITLEMENTS_ENDPOINT,
        response_model=GroupEntitlementList,
        description="Get the group entitlements for an account.",
    ),
    OperationDescriptor(
        name="group_entitlements.add",
        method="POST",
        path=endpoints.GROUP_ENTITLEMENTS_ENDPOINT,
        query_model=GroupEntitlementAddOptions,
        success_status=frozenset({201}),
        response_model=GroupEntitlementOperationReference,
        description="Create a group entitlement with license rule, extension rule.",
        **_json(GroupEntitlement),
    ),
    OperationDescriptor(
        name="group_entitlements.get",
        method="GET",
        path=endpoints.GROUP_ENTITLEMENT_ENDPOINT,
        response_model=GroupEntitlement,
        description="Get a group entitlement.",
    ),
    OperationDescriptor(
        name="group_entitlements.update",
        method="PATCH",
        path=endpoints.GROUP_ENTITLEMENT_ENDPOINT,
        query_model=GroupEntitlementUpdateOptions,
        response_model=GroupEntitlementOperationReference,
        description="Update entitlements (License Rule, Extensions Rule, Project memberships etc.) for a group.",
        **_json_patch(),
    ),
    OperationDescriptor(
        name="group_entitlements.delete",
        method="DELETE",
        path=endpoints.GROUP_ENTITLEMENT_ENDPOINT,
        query_model=GroupEntitlementDeleteOptions,
        response_model=GroupEntitlementOperationReference,
        description="Delete a group entitlement.",
    ),
    # Group members
    OperationDescriptor(
        name="members.get",
        method="GET",
        path=endpoints.GROUP_MEMBERS_ENDPOINT,
        query_model=GroupMembersQuery,
        response_model=PagedGraphMemberList,
        description="Get direct members of a Group.",
    ),
    OperationDescriptor(
        name="members.add",
        method="PUT",
        path=endpoints.GROUP_MEMBER_ENDPOINT,
        description="Add a member to a Group.",
    ),
    OperationDescriptor(
        name="members.remove",
        method="DELETE",
        path=endpoints.GROUP_MEMBER_ENDPOINT,
        description="Remove a member from a Group.",
    ),
    # User entitlements
    OperationDescriptor(
        name="user_entitlements.search",
        method="GET",
        path=endpoints.USER_ENTITLEMENTS_ENDPOINT,
        query_model=UserEntitlementSearchQuery,
        response_model=PagedGraphMemberList,
        description="Get a paged set of user entitlements matching the filter and sort criteria.",
    ),
    OperationDescriptor(
        name="user_entitlements.add",
        method="POST",
        path=endpoints.USER_ENTITLEMENTS_ENDPOINT,
        response_model=UserEntitlementsPostResponse,
        description="Add a user, assign license and extensions and make them a member of a project group.",
        **_json(UserEntitlement),
    ),
    OperationDescriptor(
        name="user_entitlements.update_many",
        method="PATCH",
        path=endpoints.USER_ENTITLEMENTS_ENDPOINT,
        query_model=UserEntitlementsUpdateOptions,
        response_model=UserEntitlementOperationReference,
        description="Edit the entitlements (License, Extensions, Projects, Teams etc) for one or more users.",
        **_json_patch(),
    ),
    OperationDescriptor(
        name="user_entitlements.get",
        method="GET",
        path=endpoints.USER_ENTITLEMENT_ENDPOINT,
        response_model=UserEntitlement,
        description="Get User Entitlement for a user.",
    ),
    OperationDescriptor(
        name="user_entitlements.update",
        method="PATCH",
        path=endpoints.USER_ENTITLEMENT_ENDPOINT,
        response_model=UserEntitlementsPatchResponse,
        description="Edit the entitlements (License, Extensions, Projects, Teams etc) for a user.",
        **_json_patch(),
    ),
    OperationDescriptor(
        name="user_entitlements.delete",
        method="DELETE",
        path=endpoints.USER_ENTITLEMENT_ENDPOINT,
        description="Delete a user from the account.",
    ),
    # User entitlement summary
    OperationDescriptor(
        name="user_entitlement_summary.get",
        method="GET",
        path=endpoints.USER_ENTITLEMENT_SUMMARY_ENDPOINT,
        query_model=UserEntitlementSummaryQuery,
        response_model=UsersSummary,
        description="Get summary of Licenses, Extension, Projects, Groups and their assignments in the collection.",
    ),
)

OPERATIONS: Dict[str, OperationDescriptor] = {op.name: op for op in _CATALOG}


def get_operation(name: str) -> OperationDescriptor:
    """
    Look up a catalog entry by key.

    Raises:
        KeyError: If no operation with that key exists
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation '{name}'. Known operations: {', '.join(sorted(OPERATIONS))}") from None
