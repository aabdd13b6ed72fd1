"""
Main Member Entitlement Management client.

This module provides the MemberEntitlementManagementClient class, the
primary entry point for the API. It owns the credential and the shared
HTTP context, and hands the same context to every endpoint client.
"""

from typing import Any, Dict, Optional, Sequence, Type, TypeVar
import logging

import httpx

from ado_entitlements_types.endpoints import DEFAULT_ENDPOINT

from ado_entitlements_client.base import BaseEndpointClient
from ado_entitlements_client.credentials import Credential
from ado_entitlements_client.endpoints import (
    GroupEntitlementsClient,
    MembersClient,
    UserEntitlementsClient,
    UserEntitlementSummaryClient,
)
from ado_entitlements_client.http import AsyncHTTPClient, PathParams, QueryInput
from ado_entitlements_client.operations import get_operation
from ado_entitlements_client.settings import EntitlementClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEndpointClient)


class MemberEntitlementManagementClient:
    """
    Main client for the Member Entitlement Management API.

    This class provides:
    - A single credential and connection pool shared by all operations
    - Lazy-loaded endpoint clients per resource family
    - Session lifecycle management

    Example usage:
        ```python
        credential = PersonalAccessTokenCredential(pat)

        async with MemberEntitlementManagementClient(credential) as client:
            groups = await client.group_entitlements.list("contoso")
            user = await client.user_entitlements.get("contoso", "user-id")

            page = await client.user_entitlements.search(
                "contoso",
                filter="licenseId eq 'Account-Express'",
            )
        ```
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Optional[Sequence[str]] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            credential: Credential producing the Authorization header (anonymous if omitted)
            endpoint: Service endpoint, defaults to https://vsaex.dev.azure.com
            scopes: Scopes requested from the credential, defaults to ["<endpoint>/"]
            timeout: Request timeout in seconds
            max_retries: Connection retries performed by the transport
            headers: Additional headers to include in all requests
            transport: Custom httpx transport
        """
        self._http = AsyncHTTPClient(
            credential,
            endpoint=endpoint,
            scopes=scopes,
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
            transport=transport,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, BaseEndpointClient] = {}

    @classmethod
    def from_settings(
        cls,
        settings: EntitlementClientSettings,
        **kwargs: Any,
    ) -> "MemberEntitlementManagementClient":
        """Create a client from settings; keyword arguments override them."""
        options: Dict[str, Any] = {
            "endpoint": settings.ENDPOINT,
            "scopes": settings.SCOPES,
            "timeout": settings.TIMEOUT,
            "max_retries": settings.MAX_RETRIES,
        }
        options.update(kwargs)
        credential = options.pop("credential", None) or settings.credential()
        return cls(credential, **options)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "MemberEntitlementManagementClient":
        """Create a client configured from ADO_* environment variables."""
        return cls.from_settings(EntitlementClientSettings(), **kwargs)

    @property
    def endpoint(self) -> str:
        """Get the service endpoint."""
        return self._http.endpoint

    @property
    def scopes(self) -> Sequence[str]:
        return tuple(self._http.scopes)

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the shared HTTP context for custom requests."""
        return self._http

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._http)
        return self._endpoint_clients[class_name]

    @property
    def group_entitlements(self) -> GroupEntitlementsClient:
        return self._get_endpoint_client(GroupEntitlementsClient)

    @property
    def members(self) -> MembersClient:
        return self._get_endpoint_client(MembersClient)

    @property
    def user_entitlements(self) -> UserEntitlementsClient:
        return self._get_endpoint_client(UserEntitlementsClient)

    @property
    def user_entitlement_summary(self) -> UserEntitlementSummaryClient:
        return self._get_endpoint_client(UserEntitlementSummaryClient)

    # =========================================================================
    # Generic execution
    # =========================================================================

    async def execute(
        self,
        operation_name: str,
        organization: str,
        *,
        path_params: Optional[PathParams] = None,
        options: QueryInput = None,
        body: Any = None,
    ) -> Any:
        """
        Run any catalog operation by key.

        Args:
            operation_name: Catalog key, e.g. "members.get"
            organization: The name of the Azure DevOps organization
            path_params: Values for the path placeholders, e.g. {"group_id": "..."}
            options: Query options model or mapping
            body: Request body

        Returns:
            The deserialized response model, or None for no-content operations
        """
        operation = get_operation(operation_name)
        return await self._http.execute(
            operation,
            organization,
            path_params=path_params,
            options=options,
            body=body,
        )

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "MemberEntitlementManagementClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        return (
            f"MemberEntitlementManagementClient(endpoint={self.endpoint!r}, "
            f"credential={self._http.credential!r})"
        )
