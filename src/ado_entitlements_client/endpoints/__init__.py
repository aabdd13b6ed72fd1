"""
Typed endpoint clients, one per resource family.
"""

from ado_entitlements_client.endpoints.group_entitlements import GroupEntitlementsClient
from ado_entitlements_client.endpoints.members import MembersClient
from ado_entitlements_client.endpoints.user_entitlement_summary import UserEntitlementSummaryClient
from ado_entitlements_client.endpoints.user_entitlements import UserEntitlementsClient

__all__ = [
    "GroupEntitlementsClient",
    "MembersClient",
    "UserEntitlementSummaryClient",
    "UserEntitlementsClient",
]
