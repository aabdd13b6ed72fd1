from typing import Optional

from pydantic import Field

from ado_entitlements_types.base import QueryOptions
from ado_entitlements_types.user_entitlements import PagedGraphMemberList


class GroupMembersQuery(QueryOptions):
    max_results: Optional[int] = Field(None, alias="maxResults", gt=0, description="Maximum number of results per page")
    paging_token: Optional[str] = Field(None, alias="pagingToken", description="Cursor returned by the previous page")


__all__ = ["GroupMembersQuery", "PagedGraphMemberList"]
