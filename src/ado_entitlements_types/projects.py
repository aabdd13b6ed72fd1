from enum import Enum
from typing import List, Optional

from pydantic import Field

from ado_entitlements_types.base import WireModel
from ado_entitlements_types.licensing import AccessLevel


class GroupType(str, Enum):
    project_stakeholder = "projectStakeholder"
    project_reader = "projectReader"
    project_contributor = "projectContributor"
    project_administrator = "projectAdministrator"
    custom = "custom"


class ProjectPermissionInherited(str, Enum):
    not_set = "notSet"
    not_inherited = "notInherited"
    inherited = "inherited"


class ProjectRef(WireModel):
    id: Optional[str] = Field(None, description="Project ID")
    name: Optional[str] = Field(None, description="Project name")


class TeamRef(WireModel):
    id: Optional[str] = Field(None, description="Team ID")
    name: Optional[str] = Field(None, description="Team name")


class Group(WireModel):
    display_name: Optional[str] = Field(None, description="Display name of the project group")
    group_type: Optional[GroupType] = Field(None, description="Project level group type")


class ProjectEntitlement(WireModel):
    """Membership of a user or group in a single project."""

    assignment_source: Optional[str] = None
    group: Optional[Group] = None
    is_project_permission_inherited: Optional[bool] = None
    project_permission_inherited: Optional[ProjectPermissionInherited] = None
    project_ref: Optional[ProjectRef] = None
    team_refs: Optional[List[TeamRef]] = None


class GroupOption(WireModel):
    access_level: Optional[AccessLevel] = None
    group: Optional[Group] = None
