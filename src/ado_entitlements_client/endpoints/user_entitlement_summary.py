from typing import Optional, Sequence, Union

from ado_entitlements_types.summary import SummaryPropertyName, UserEntitlementSummaryQuery, UsersSummary

from ado_entitlements_client.base import BaseEndpointClient


class UserEntitlementSummaryClient(BaseEndpointClient):
    """
    Client for the userentitlementsummary endpoint.
    """

    family = "user_entitlement_summary"

    async def get(
        self,
        organization: str,
        query: Optional[UserEntitlementSummaryQuery] = None,
        *,
        select: Union[str, Sequence[Union[str, SummaryPropertyName]], None] = None,
    ) -> UsersSummary:
        """Get summary of Licenses, Extension, Projects, Groups and their assignments in the collection."""
        return await self._execute(
            "get",
            organization,
            options=self._merge_options("get", query, {"select": select}),
        )
