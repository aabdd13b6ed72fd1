"""
Azure DevOps Member Entitlement Management client library.

A type-safe async HTTP client for group entitlements, group members,
user entitlements and the user entitlement summary.

Example usage:
    ```python
    from ado_entitlements_client import (
        MemberEntitlementManagementClient,
        PersonalAccessTokenCredential,
    )

    async with MemberEntitlementManagementClient(
        PersonalAccessTokenCredential("my-pat"),
    ) as client:
        groups = await client.group_entitlements.list("contoso")

        from ado_entitlements_types import JsonPatchDocument, JsonPatchOperation
        await client.user_entitlements.update(
            "contoso",
            "user-id",
            JsonPatchDocument.of(
                JsonPatchOperation.replace("/accessLevel", {"accountLicenseType": "express"}),
            ),
        )
    ```
"""

from ado_entitlements_client._version import __version__

# Main client
from ado_entitlements_client.client import MemberEntitlementManagementClient

# Credentials
from ado_entitlements_client.credentials import (
    AnonymousCredential,
    BearerTokenCredential,
    Credential,
    HeaderCredential,
    PersonalAccessTokenCredential,
    TokenProviderCredential,
)

# HTTP context and operation catalog (for advanced usage)
from ado_entitlements_client.http import AsyncHTTPClient
from ado_entitlements_client.operations import OPERATIONS, OperationDescriptor, get_operation
from ado_entitlements_client.settings import EntitlementClientSettings

# Endpoint clients
from ado_entitlements_client.endpoints import (
    GroupEntitlementsClient,
    MembersClient,
    UserEntitlementsClient,
    UserEntitlementSummaryClient,
)

# Exceptions
from ado_entitlements_client.exceptions import (
    # Base exception
    EntitlementClientError,
    # Credential errors
    CredentialError,
    # HTTP status errors
    HttpResponseError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    # Conversion errors
    DataConversionError,
    # Network errors
    NetworkError,
    TimeoutError,
    ConnectionError,
    # Utility
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "MemberEntitlementManagementClient",
    # Credentials
    "Credential",
    "AnonymousCredential",
    "BearerTokenCredential",
    "HeaderCredential",
    "PersonalAccessTokenCredential",
    "TokenProviderCredential",
    # HTTP components
    "AsyncHTTPClient",
    "OperationDescriptor",
    "OPERATIONS",
    "get_operation",
    "EntitlementClientSettings",
    # Endpoint clients
    "GroupEntitlementsClient",
    "MembersClient",
    "UserEntitlementsClient",
    "UserEntitlementSummaryClient",
    # Exceptions
    "EntitlementClientError",
    "CredentialError",
    "HttpResponseError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "DataConversionError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "exception_from_response",
]
