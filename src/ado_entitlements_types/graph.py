from typing import Any, Dict, Optional

from pydantic import Field

from ado_entitlements_types.base import WireModel


class GraphSubject(WireModel):
    """Common base of every Graph identity (user, group, service principal)."""

    links: Optional[Dict[str, Any]] = Field(None, alias="_links", description="Links to related resources")
    descriptor: Optional[str] = Field(None, description="Primary way to reference the subject")
    display_name: Optional[str] = Field(None, description="Name of the subject for display")
    url: Optional[str] = Field(None, description="Full route of the subject")
    legacy_descriptor: Optional[str] = Field(None, description="Descriptor kept for older APIs")
    origin: Optional[str] = Field(None, description="Origin directory type, e.g. aad or vsts")
    origin_id: Optional[str] = Field(None, description="Identifier in the origin directory")
    subject_kind: Optional[str] = Field(None, description="user, group or servicePrincipal")


class GraphMember(GraphSubject):
    domain: Optional[str] = Field(None, description="Domain of the origin directory")
    mail_address: Optional[str] = Field(None, description="Email address of record")
    principal_name: Optional[str] = Field(None, description="Principal name (UPN or group name)")


class GraphUser(GraphMember):
    directory_alias: Optional[str] = None
    is_deleted_in_origin: Optional[bool] = None
    meta_type: Optional[str] = None


class GraphGroup(GraphMember):
    description: Optional[str] = None
    is_cross_project: Optional[bool] = None
    is_deleted: Optional[bool] = None
    is_global_scope: Optional[bool] = None
    is_restricted_visible: Optional[bool] = None
    local_scope_id: Optional[str] = None
    scope_id: Optional[str] = None
    scope_name: Optional[str] = None
    scope_type: Optional[str] = None
    securing_host_id: Optional[str] = None
    special_type: Optional[str] = None
