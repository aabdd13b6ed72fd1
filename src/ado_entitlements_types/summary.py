from enum import Enum
from typing import List, Optional, Sequence, Union

from pydantic import Field, field_validator

from ado_entitlements_types.base import QueryOptions, WireModel
from ado_entitlements_types.licensing import AccessLevel, ExtensionSummaryData, LicenseSummaryData
from ado_entitlements_types.projects import GroupOption, ProjectRef


class SummaryPropertyName(str, Enum):
    access_levels = "AccessLevels"
    licenses = "Licenses"
    projects = "Projects"
    groups = "Groups"


class UsersSummary(WireModel):
    """Licenses, extensions, projects and groups with their assignment counts."""

    available_access_levels: Optional[List[AccessLevel]] = None
    default_access_level: Optional[AccessLevel] = None
    extensions: Optional[List[ExtensionSummaryData]] = None
    group_options: Optional[List[GroupOption]] = None
    licenses: Optional[List[LicenseSummaryData]] = None
    project_refs: Optional[List[ProjectRef]] = None


class UserEntitlementSummaryQuery(QueryOptions):
    select: Optional[str] = Field(None, alias="select", description="Comma separated facet names")

    @field_validator("select", mode="before")
    @classmethod
    def join_facets(cls, v: Union[None, str, Sequence[Union[str, SummaryPropertyName]]]):
        if v is None or isinstance(v, str):
            return v
        return ",".join(item.value if isinstance(item, SummaryPropertyName) else str(item) for item in v)
