"""
Wire models for the Azure DevOps Member Entitlement Management API.

Pure data definitions shared by the client; no HTTP code lives here.
"""

from ado_entitlements_types.base import OperationResult, QueryOptions, WireModel
from ado_entitlements_types.graph import GraphGroup, GraphMember, GraphSubject, GraphUser
from ado_entitlements_types.group_entitlements import (
    GroupEntitlement,
    GroupEntitlementAddOptions,
    GroupEntitlementDeleteOptions,
    GroupEntitlementList,
    GroupEntitlementOperationReference,
    GroupEntitlementStatus,
    GroupEntitlementUpdateOptions,
    GroupOperationResult,
    RuleOption,
    UserEntitlementRef,
)
from ado_entitlements_types.json_patch import JsonPatchDocument, JsonPatchOperation, Operation
from ado_entitlements_types.licensing import (
    AccessLevel,
    AccountLicenseType,
    AccountUserStatus,
    AssignmentSource,
    Extension,
    ExtensionSummaryData,
    GitHubLicenseType,
    GroupExtensionRule,
    LicenseSummaryData,
    LicensingSource,
    MsdnLicenseType,
)
from ado_entitlements_types.members import GroupMembersQuery
from ado_entitlements_types.projects import (
    Group,
    GroupOption,
    GroupType,
    ProjectEntitlement,
    ProjectPermissionInherited,
    ProjectRef,
    TeamRef,
)
from ado_entitlements_types.summary import SummaryPropertyName, UserEntitlementSummaryQuery, UsersSummary
from ado_entitlements_types.user_entitlements import (
    PagedGraphMemberList,
    UserEntitlement,
    UserEntitlementOperationReference,
    UserEntitlementOperationResult,
    UserEntitlementSearchQuery,
    UserEntitlementsPatchResponse,
    UserEntitlementsPostResponse,
    UserEntitlementsUpdateOptions,
)

__all__ = [
    "WireModel",
    "QueryOptions",
    "OperationResult",
    "GraphSubject",
    "GraphMember",
    "GraphUser",
    "GraphGroup",
    "GroupEntitlement",
    "GroupEntitlementList",
    "GroupEntitlementOperationReference",
    "GroupEntitlementStatus",
    "GroupOperationResult",
    "UserEntitlementRef",
    "RuleOption",
    "GroupEntitlementAddOptions",
    "GroupEntitlementUpdateOptions",
    "GroupEntitlementDeleteOptions",
    "JsonPatchDocument",
    "JsonPatchOperation",
    "Operation",
    "AccessLevel",
    "AccountLicenseType",
    "AccountUserStatus",
    "AssignmentSource",
    "Extension",
    "ExtensionSummaryData",
    "GitHubLicenseType",
    "GroupExtensionRule",
    "LicenseSummaryData",
    "LicensingSource",
    "MsdnLicenseType",
    "GroupMembersQuery",
    "Group",
    "GroupOption",
    "GroupType",
    "ProjectEntitlement",
    "ProjectPermissionInherited",
    "ProjectRef",
    "TeamRef",
    "SummaryPropertyName",
    "UserEntitlementSummaryQuery",
    "UsersSummary",
    "PagedGraphMemberList",
    "UserEntitlement",
    "UserEntitlementOperationReference",
    "UserEntitlementOperationResult",
    "UserEntitlementSearchQuery",
    "UserEntitlementsPatchResponse",
    "UserEntitlementsPostResponse",
    "UserEntitlementsUpdateOptions",
]
