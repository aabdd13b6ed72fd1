"""
Endpoint client for group entitlements.

Group entitlements grant a license rule, extension rules and project
memberships to every member of an Azure AD or Azure DevOps group.
"""

from typing import Any, Dict, List, Optional, Union

from ado_entitlements_types.group_entitlements import (
    GroupEntitlement,
    GroupEntitlementAddOptions,
    GroupEntitlementDeleteOptions,
    GroupEntitlementList,
    GroupEntitlementOperationReference,
    GroupEntitlementUpdateOptions,
    RuleOption,
)
from ado_entitlements_types.json_patch import JsonPatchDocument

from ado_entitlements_client.base import BaseEndpointClient


class GroupEntitlementsClient(BaseEndpointClient):
    """
    Client for groupentitlements endpoints.
    """

    family = "group_entitlements"

    async def list(self, organization: str) -> List[GroupEntitlement]:
        """Get the group entitlements for an account."""
        result = await self.list_raw(organization)
        return result.value

    async def list_raw(self, organization: str) -> GroupEntitlementList:
        """Get the group entitlements wrapped in the service's list model."""
        return await self._execute("list", organization)

    async def add(
        self,
        organization: str,
        data: Union[GroupEntitlement, Dict[str, Any]],
        options: Optional[GroupEntitlementAddOptions] = None,
        *,
        rule_option: Optional[RuleOption] = None,
    ) -> GroupEntitlementOperationReference:
        """
        Create a group entitlement with license rule, extension rule.

        Args:
            organization: The name of the Azure DevOps organization
            data: License rule, extension rules and project entitlements of the group
            options: Query options
            rule_option: Shortcut for options.rule_option; test only dry-runs the rules
        """
        return await self._execute(
            "add",
            organization,
            options=self._merge_options("add", options, {"rule_option": rule_option}),
            body=data,
        )

    async def get(self, organization: str, group_id: str) -> GroupEntitlement:
        """Get a group entitlement."""
        return await self._execute("get", organization, path_params={"group_id": group_id})

    async def update(
        self,
        organization: str,
        group_id: str,
        patch: Union[JsonPatchDocument, List[Dict[str, Any]]],
        options: Optional[GroupEntitlementUpdateOptions] = None,
        *,
        rule_option: Optional[RuleOption] = None,
    ) -> GroupEntitlementOperationReference:
        """Update entitlements (License Rule, Extensions Rule, Project memberships etc.) for a group."""
        return await self._execute(
            "update",
            organization,
            path_params={"group_id": group_id},
            options=self._merge_options("update", options, {"rule_option": rule_option}),
            body=patch,
        )

    async def delete(
        self,
        organization: str,
        group_id: str,
        options: Optional[GroupEntitlementDeleteOptions] = None,
        *,
        rule_option: Optional[RuleOption] = None,
        remove_group_membership: Optional[bool] = None,
    ) -> GroupEntitlementOperationReference:
        """
        Delete a group entitlement.

        Args:
            organization: The name of the Azure DevOps organization
            group_id: ID of the group to delete
            options: Query options
            rule_option: Shortcut for options.rule_option
            remove_group_membership: Also remove the group from all project groups
        """
        return await self._execute(
            "delete",
            organization,
            path_params={"group_id": group_id},
            options=self._merge_options(
                "delete",
                options,
                {"rule_option": rule_option, "remove_group_membership": remove_group_membership},
            ),
        )
