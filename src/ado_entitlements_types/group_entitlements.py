from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, Field

from ado_entitlements_types.base import OperationResult, QueryOptions, WireModel
from ado_entitlements_types.graph import GraphGroup, GraphMember
from ado_entitlements_types.licensing import AccessLevel, Extension, GroupExtensionRule
from ado_entitlements_types.projects import ProjectEntitlement


class RuleOption(str, Enum):
    """Whether a group rule change is applied for real or only dry-run tested."""

    apply_group_rule = "applyGroupRule"
    test_apply_group_rule = "testApplyGroupRule"


class GroupEntitlementStatus(str, Enum):
    unknown = "unknown"
    in_progress = "inProgress"
    completed = "completed"
    failed = "failed"


class GroupEntitlement(WireModel):
    """
    License rule, extension rules and project memberships granted to a group.

    Members of the group receive the entitlements through the group rules.
    """

    extension_rules: Optional[List[GroupExtensionRule]] = Field(None, description="Extension rules")
    group: Optional[GraphGroup] = Field(None, description="Member reference")
    id: Optional[str] = Field(None, description="The group entitlement id")
    last_executed: Optional[datetime] = Field(None, description="Last time the rules were evaluated")
    license_rule: Optional[AccessLevel] = Field(None, description="License rule")
    members: Optional[List["UserEntitlementRef"]] = Field(None, description="Group members")
    project_entitlements: Optional[List[ProjectEntitlement]] = Field(None, description="Relation between a group and projects")
    status: Optional[GroupEntitlementStatus] = Field(None, description="Status of the last rule application")


class UserEntitlementRef(WireModel):
    """Group member as returned inside a group entitlement."""

    access_level: Optional[AccessLevel] = None
    date_created: Optional[datetime] = None
    extensions: Optional[List[Extension]] = None
    id: Optional[str] = None
    last_accessed_date: Optional[datetime] = None
    member: Optional[GraphMember] = None
    project_entitlements: Optional[List[ProjectEntitlement]] = None


GroupEntitlement.model_rebuild()


class GroupEntitlementList(WireModel):
    count: Optional[int] = None
    value: List[GroupEntitlement] = Field(
        default_factory=list,
        validation_alias=AliasChoices("value", "groupEntitlements"),
    )


class GroupOperationResult(OperationResult):
    group_id: Optional[str] = None
    result: Optional[GroupEntitlement] = None


class GroupEntitlementOperationReference(WireModel):
    """Reference to an asynchronous group entitlement operation."""

    id: Optional[str] = Field(None, description="Unique identifier for the operation")
    plugin_id: Optional[str] = None
    status: Optional[str] = Field(None, description="queued, inProgress, cancelled, succeeded or failed")
    url: Optional[str] = None
    completed: Optional[bool] = None
    have_results_succeeded: Optional[bool] = None
    results: Optional[List[GroupOperationResult]] = None


class GroupEntitlementAddOptions(QueryOptions):
    rule_option: Optional[RuleOption] = Field(None, alias="ruleOption")


class GroupEntitlementUpdateOptions(QueryOptions):
    rule_option: Optional[RuleOption] = Field(None, alias="ruleOption")


class GroupEntitlementDeleteOptions(QueryOptions):
    rule_option: Optional[RuleOption] = Field(None, alias="ruleOption")
    remove_group_membership: Optional[bool] = Field(None, alias="removeGroupMembership")
