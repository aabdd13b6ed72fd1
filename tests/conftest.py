"""Pytest configuration and fixtures for ado-entitlements-client tests."""

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import respx

from ado_entitlements_client import (
    AsyncHTTPClient,
    MemberEntitlementManagementClient,
    PersonalAccessTokenCredential,
)


ENDPOINT = "https://vsaex.dev.azure.com"
ORGANIZATION = "contoso"
API_BASE = f"{ENDPOINT}/{ORGANIZATION}/_apis"


# ============================================================================
# Recording transport
# ============================================================================


class RecordingTransport(httpx.AsyncBaseTransport):
    """Transport that records every request and answers from a handler."""

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: List[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={}))

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# ============================================================================
# Sample payloads
# ============================================================================


@pytest.fixture
def group_entitlement_data() -> Dict[str, Any]:
    """A group entitlement as returned by the service."""
    return {
        "id": "9a1f2a04-2d2b-4b5e-9d4c-6a0bbc1d0d11",
        "group": {
            "subjectKind": "group",
            "displayName": "[contoso]\\Developers",
            "origin": "aad",
            "originId": "a2b4c6d8",
            "descriptor": "aadgp.Uy0xLTktMTU1MTM3NDI0NS0xMjA0NDAwOTY5",
            "_links": {"self": {"href": "https://vssps.dev.azure.com/contoso/_apis/Graph/Groups/aadgp"}},
        },
        "licenseRule": {
            "accountLicenseType": "express",
            "licensingSource": "account",
            "status": "active",
        },
        "extensionRules": [
            {"id": "ms.feed", "name": "Azure Artifacts", "assignmentSource": "groupRule"},
        ],
        "projectEntitlements": [
            {
                "group": {"groupType": "projectContributor", "displayName": "Contributors"},
                "projectRef": {"id": "p-1", "name": "Fabrikam"},
                "projectPermissionInherited": "notSet",
            },
        ],
        "status": "completed",
        "lastExecuted": "2024-03-01T10:15:00Z",
    }


@pytest.fixture
def user_entitlement_data() -> Dict[str, Any]:
    """A user entitlement as returned by the service."""
    return {
        "id": "8d7a6c1e-0000-4a1f-9d2d-111111111111",
        "user": {
            "subjectKind": "user",
            "displayName": "Jamie Doe",
            "mailAddress": "jamie@contoso.com",
            "principalName": "jamie@contoso.com",
            "origin": "aad",
        },
        "accessLevel": {
            "accountLicenseType": "stakeholder",
            "assignmentSource": "unknown",
            "licenseDisplayName": "Stakeholder",
            "licensingSource": "account",
            "msdnLicenseType": "none",
            "gitHubLicenseType": "none",
            "status": "active",
            "statusMessage": "",
        },
        "lastAccessedDate": "2024-02-29T08:00:00Z",
        "dateCreated": "2023-01-15T12:00:00Z",
        "extensions": [],
        "projectEntitlements": [],
    }


@pytest.fixture
def operation_reference_data() -> Dict[str, Any]:
    """Reference to an asynchronous entitlement operation."""
    return {
        "id": "op-1",
        "pluginId": "plugin-1",
        "status": "succeeded",
        "url": "https://vsaex.dev.azure.com/contoso/_apis/operations/op-1",
        "completed": True,
        "haveResultsSucceeded": True,
        "results": [],
    }


@pytest.fixture
def azure_error_data() -> Dict[str, Any]:
    """Azure DevOps error envelope."""
    return {
        "$id": "1",
        "innerException": None,
        "message": "The group entitlement could not be found.",
        "typeName": "Microsoft.VisualStudio.Services.MemberEntitlementManagement.GroupEntitlementNotFoundException",
        "typeKey": "GroupEntitlementNotFoundException",
        "errorCode": 0,
        "eventId": 3000,
    }


# ============================================================================
# Client fixtures
# ============================================================================


@pytest.fixture
def organization() -> str:
    """Default organization for testing."""
    return ORGANIZATION


@pytest.fixture
def transport() -> RecordingTransport:
    """Recording transport answering 200 {} unless told otherwise."""
    return RecordingTransport()


@pytest.fixture
def http_client(transport) -> AsyncHTTPClient:
    """HTTP context wired to the recording transport."""
    return AsyncHTTPClient(PersonalAccessTokenCredential("test-pat"), transport=transport)


@pytest.fixture
def client() -> MemberEntitlementManagementClient:
    """Top-level client using the default transport (mocked through respx)."""
    return MemberEntitlementManagementClient(PersonalAccessTokenCredential("test-pat"))


# ============================================================================
# respx Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Create a respx mock context."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock
