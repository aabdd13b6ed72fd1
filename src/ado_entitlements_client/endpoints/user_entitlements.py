"""
Endpoint client for user entitlements.

A user entitlement is the access level (license), extensions, group rules
and project memberships of one user in an organization.
"""

from typing import Any, AsyncIterator, Dict, List, Optional, Union

from ado_entitlements_types.json_patch import JsonPatchDocument
from ado_entitlements_types.user_entitlements import (
    PagedGraphMemberList,
    UserEntitlement,
    UserEntitlementOperationReference,
    UserEntitlementSearchQuery,
    UserEntitlementsPatchResponse,
    UserEntitlementsPostResponse,
    UserEntitlementsUpdateOptions,
)

from ado_entitlements_client.base import BaseEndpointClient, collect, iterate_pages

PatchInput = Union[JsonPatchDocument, List[Dict[str, Any]]]


class UserEntitlementsClient(BaseEndpointClient):
    """
    Client for userentitlements endpoints.
    """

    family = "user_entitlements"

    async def search(
        self,
        organization: str,
        query: Optional[UserEntitlementSearchQuery] = None,
        *,
        continuation_token: Optional[str] = None,
        select: Optional[str] = None,
        filter: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> PagedGraphMemberList:
        """
        Get a paged set of user entitlements matching the filter and sort criteria.

        Args:
            organization: The name of the Azure DevOps organization
            query: Query options
            continuation_token: Cursor returned by the previous page
            select: Comma separated facets to include: Projects, Extensions, Grouprules
            filter: Filter expression, e.g. "licenseId eq 'Account-Stakeholder'"
            order_by: Sort expression, e.g. "name Ascending"
        """
        return await self._execute(
            "search",
            organization,
            options=self._merge_options(
                "search",
                query,
                {
                    "continuation_token": continuation_token,
                    "select": select,
                    "filter": filter,
                    "order_by": order_by,
                },
            ),
        )

    async def add(
        self,
        organization: str,
        data: Union[UserEntitlement, Dict[str, Any]],
    ) -> UserEntitlementsPostResponse:
        """Add a user, assign license and extensions and make them a member of a project group."""
        return await self._execute("add", organization, body=data)

    async def update_many(
        self,
        organization: str,
        patch: PatchInput,
        options: Optional[UserEntitlementsUpdateOptions] = None,
        *,
        do_not_send_invite_for_new_users: Optional[bool] = None,
    ) -> UserEntitlementOperationReference:
        """Edit the entitlements (License, Extensions, Projects, Teams etc) for one or more users."""
        return await self._execute(
            "update_many",
            organization,
            options=self._merge_options(
                "update_many",
                options,
                {"do_not_send_invite_for_new_users": do_not_send_invite_for_new_users},
            ),
            body=patch,
        )

    async def get(self, organization: str, user_id: str) -> UserEntitlement:
        """Get User Entitlement for a user."""
        return await self._execute("get", organization, path_params={"user_id": user_id})

    async def update(
        self,
        organization: str,
        user_id: str,
        patch: PatchInput,
    ) -> UserEntitlementsPatchResponse:
        """Edit the entitlements (License, Extensions, Projects, Teams etc) for a user."""
        return await self._execute(
            "update",
            organization,
            path_params={"user_id": user_id},
            body=patch,
        )

    async def delete(self, organization: str, user_id: str) -> None:
        """
        Delete a user from the account.

        Unassigns extensions and licenses and removes the user from all
        project memberships. Access granted through an AAD group that is
        added to the account directly is not affected.
        """
        await self._execute("delete", organization, path_params={"user_id": user_id})

    async def iter_pages(
        self,
        organization: str,
        query: Optional[UserEntitlementSearchQuery] = None,
        *,
        max_pages: Optional[int] = None,
    ) -> AsyncIterator[PagedGraphMemberList]:
        """Iterate over every search page, following the continuation token."""

        async def fetch(token: Optional[str]) -> PagedGraphMemberList:
            return await self.search(organization, query, continuation_token=token)

        async for page in iterate_pages(fetch, lambda page: page.continuation_token, max_pages):
            yield page

    async def iter_all(
        self,
        organization: str,
        query: Optional[UserEntitlementSearchQuery] = None,
    ) -> AsyncIterator[UserEntitlement]:
        """Iterate over all user entitlements matching the query."""
        async for page in self.iter_pages(organization, query):
            for entitlement in page.members:
                yield entitlement

    async def get_all(
        self,
        organization: str,
        query: Optional[UserEntitlementSearchQuery] = None,
    ) -> List[UserEntitlement]:
        """Get all user entitlements matching the query (with pagination)."""
        return await collect(self.iter_all(organization, query))
