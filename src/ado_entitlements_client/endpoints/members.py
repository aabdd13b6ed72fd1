"""Endpoint client for the direct members of an entitlement group."""

from typing import AsyncIterator, List, Optional

from ado_entitlements_types.members import GroupMembersQuery
from ado_entitlements_types.user_entitlements import PagedGraphMemberList, UserEntitlement

from ado_entitlements_client.base import BaseEndpointClient, collect, iterate_pages


class MembersClient(BaseEndpointClient):
    """
    Client for GroupEntitlements/{group_id}/members endpoints.
    """

    family = "members"

    async def get(
        self,
        organization: str,
        group_id: str,
        query: Optional[GroupMembersQuery] = None,
        *,
        max_results: Optional[int] = None,
        paging_token: Optional[str] = None,
    ) -> PagedGraphMemberList:
        """Get direct members of a Group."""
        return await self._execute(
            "get",
            organization,
            path_params={"group_id": group_id},
            options=self._merge_options(
                "get",
                query,
                {"max_results": max_results, "paging_token": paging_token},
            ),
        )

    async def add(self, organization: str, group_id: str, member_id: str) -> None:
        """Add a member to a Group."""
        await self._execute(
            "add",
            organization,
            path_params={"group_id": group_id, "member_id": member_id},
        )

    async def remove(self, organization: str, group_id: str, member_id: str) -> None:
        """Remove a member from a Group."""
        await self._execute(
            "remove",
            organization,
            path_params={"group_id": group_id, "member_id": member_id},
        )

    async def iter_pages(
        self,
        organization: str,
        group_id: str,
        *,
        max_results: Optional[int] = None,
        max_pages: Optional[int] = None,
    ) -> AsyncIterator[PagedGraphMemberList]:
        """Iterate over every page of direct members, following the paging token."""

        async def fetch(token: Optional[str]) -> PagedGraphMemberList:
            return await self.get(organization, group_id, max_results=max_results, paging_token=token)

        async for page in iterate_pages(fetch, lambda page: page.continuation_token, max_pages):
            yield page

    async def iter_members(
        self,
        organization: str,
        group_id: str,
        *,
        max_results: Optional[int] = None,
    ) -> AsyncIterator[UserEntitlement]:
        """Iterate over all direct members of a group across pages."""
        async for page in self.iter_pages(organization, group_id, max_results=max_results):
            for member in page.members:
                yield member

    async def get_all(
        self,
        organization: str,
        group_id: str,
        *,
        max_results: Optional[int] = None,
    ) -> List[UserEntitlement]:
        """Get all direct members of a group (with pagination)."""
        return await collect(self.iter_members(organization, group_id, max_results=max_results))
