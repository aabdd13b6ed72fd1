from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ado_entitlements_types.base import OperationResult, QueryOptions, WireModel
from ado_entitlements_types.graph import GraphMember
from ado_entitlements_types.group_entitlements import GroupEntitlement
from ado_entitlements_types.licensing import AccessLevel, Extension
from ado_entitlements_types.projects import ProjectEntitlement


class UserEntitlement(WireModel):
    """License, extensions and project memberships of a single user."""

    access_level: Optional[AccessLevel] = Field(None, description="User's access level denoted by a license")
    date_created: Optional[datetime] = Field(None, description="Date the user was added to the organization")
    extensions: Optional[List[Extension]] = Field(None, description="User's extensions")
    group_assignments: Optional[List[GroupEntitlement]] = Field(None, description="Group entitlements the user belongs to")
    id: Optional[str] = Field(None, description="The unique identifier which matches the Id of the Identity")
    last_accessed_date: Optional[datetime] = Field(None, description="Date the user last accessed the organization")
    project_entitlements: Optional[List[ProjectEntitlement]] = Field(None, description="Relation between a user and projects")
    user: Optional[GraphMember] = Field(None, description="User reference")


class PagedGraphMemberList(WireModel):
    """One page of user entitlements plus the cursor of the next page."""

    continuation_token: Optional[str] = Field(None, description="Cursor for the next page, absent on the last page")
    members: List[UserEntitlement] = Field(default_factory=list)
    total_count: Optional[int] = None


class UserEntitlementOperationResult(OperationResult):
    result: Optional[UserEntitlement] = None
    user_id: Optional[str] = None


class UserEntitlementsResponseBase(WireModel):
    is_success: Optional[bool] = None
    user_entitlement: Optional[UserEntitlement] = None


class UserEntitlementsPostResponse(UserEntitlementsResponseBase):
    operation_result: Optional[UserEntitlementOperationResult] = None


class UserEntitlementsPatchResponse(UserEntitlementsResponseBase):
    operation_results: Optional[List[UserEntitlementOperationResult]] = None


class UserEntitlementOperationReference(WireModel):
    """Reference to an asynchronous bulk user entitlement operation."""

    id: Optional[str] = None
    plugin_id: Optional[str] = None
    status: Optional[str] = None
    url: Optional[str] = None
    completed: Optional[bool] = None
    have_results_succeeded: Optional[bool] = None
    results: Optional[List[UserEntitlementOperationResult]] = None


class UserEntitlementSearchQuery(QueryOptions):
    """
    Paging, projection, filter and sort for the user entitlement search.

    filter uses the service query language, e.g.
    ``name eq 'John' and licenseId eq 'Account-Express'``.
    """

    continuation_token: Optional[str] = Field(None, alias="continuationToken")
    select: Optional[str] = Field(None, alias="select", description="Comma separated: Projects, Extensions, Grouprules")
    filter: Optional[str] = Field(None, alias="$filter")
    order_by: Optional[str] = Field(None, alias="$orderBy", description="e.g. 'name Ascending'")


class UserEntitlementsUpdateOptions(QueryOptions):
    do_not_send_invite_for_new_users: Optional[bool] = Field(None, alias="doNotSendInviteForNewUsers")
