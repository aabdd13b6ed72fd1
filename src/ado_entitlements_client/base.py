"""
Base classes for typed endpoint clients.

Endpoint clients are thin: each method names a catalog entry and forwards
its arguments to the shared dispatcher. Pagination helpers for the
cursor-based listings live here as well.
"""

from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Optional, TypeVar
import logging

from pydantic import BaseModel

from ado_entitlements_client.http import AsyncHTTPClient, PathParams, QueryInput
from ado_entitlements_client.operations import get_operation

logger = logging.getLogger(__name__)

TPage = TypeVar("TPage", bound=BaseModel)


class BaseEndpointClient:
    """
    Base class for all endpoint clients.

    Provides access to the shared HTTP context and operation lookup.
    """

    #: Catalog key prefix, e.g. "group_entitlements"
    family: str = ""

    def __init__(self, http_client: AsyncHTTPClient):
        """
        Initialize the endpoint client.

        Args:
            http_client: The shared HTTP context
        """
        self._http = http_client

    async def _execute(
        self,
        action: str,
        organization: str,
        *,
        path_params: Optional[PathParams] = None,
        options: QueryInput = None,
        body: Any = None,
    ) -> Any:
        operation = get_operation(f"{self.family}.{action}")
        return await self._http.execute(
            operation,
            organization,
            path_params=path_params,
            options=options,
            body=body,
        )

    def _merge_options(self, action: str, options: QueryInput, overrides: Dict[str, Any]) -> QueryInput:
        """
        Combine an options object with keyword shortcuts; None values are dropped.

        Mappings may use wire names or field names. They are validated into the
        action's options model first so that a shortcut replaces the same
        parameter whichever name the mapping used.
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if not overrides:
            return options
        if options is None:
            return overrides
        if not isinstance(options, BaseModel):
            query_model = get_operation(f"{self.family}.{action}").query_model
            options = query_model.model_validate(dict(options))
        merged = options.model_dump(exclude_none=True)
        merged.update(overrides)
        return merged


async def iterate_pages(
    fetch_page: Callable[[Optional[str]], Awaitable[TPage]],
    token_of: Callable[[TPage], Optional[str]],
    max_pages: Optional[int] = None,
) -> AsyncIterator[TPage]:
    """
    Follow a continuation token across pages.

    Stops when the service returns no token, repeats a token, or when
    max_pages pages have been fetched.

    Args:
        fetch_page: Coroutine fetching the page for a token (None = first page)
        token_of: Extracts the next-page token from a page
        max_pages: Optional upper bound on the number of requests
    """
    token: Optional[str] = None
    seen = set()
    pages = 0

    while True:
        page = await fetch_page(token)
        pages += 1
        yield page

        token = token_of(page)
        if not token or token in seen:
            break
        if max_pages is not None and pages >= max_pages:
            break
        seen.add(token)
        logger.debug(f"Fetching next page ({pages + 1})")


async def collect(iterator: AsyncIterator[Any]) -> List[Any]:
    """Drain an async iterator into a list."""
    return [item async for item in iterator]
