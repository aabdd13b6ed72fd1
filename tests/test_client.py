"""Tests for MemberEntitlementManagementClient."""

import asyncio

import httpx
import pytest

from ado_entitlements_client import (
    AsyncHTTPClient,
    BearerTokenCredential,
    EntitlementClientSettings,
    GroupEntitlementsClient,
    MemberEntitlementManagementClient,
    MembersClient,
    PersonalAccessTokenCredential,
    UserEntitlementsClient,
    UserEntitlementSummaryClient,
)
from ado_entitlements_types import GroupEntitlementList, PagedGraphMemberList

from conftest import RecordingTransport

API_BASE = "https://vsaex.dev.azure.com/contoso/_apis"


class TestClientInitialization:
    """Tests for client construction."""

    def test_defaults(self):
        """Test default endpoint and scopes."""
        client = MemberEntitlementManagementClient()
        assert client.endpoint == "https://vsaex.dev.azure.com"
        assert client.scopes == ("https://vsaex.dev.azure.com/",)
        assert isinstance(client.http, AsyncHTTPClient)

    def test_custom_settings(self):
        """Test custom endpoint, scopes and timeouts."""
        client = MemberEntitlementManagementClient(
            BearerTokenCredential("t"),
            endpoint="https://vsaex.example.test/",
            scopes=["api://custom/.default"],
            timeout=5.0,
            max_retries=0,
        )
        assert client.endpoint == "https://vsaex.example.test"
        assert client.scopes == ("api://custom/.default",)
        assert client.http.timeout == 5.0
        assert client.http.max_retries == 0

    def test_repr_hides_credential_secret(self):
        """Test repr shows the credential type but not the token."""
        client = MemberEntitlementManagementClient(PersonalAccessTokenCredential("secret-pat"))
        assert "secret-pat" not in repr(client)
        assert "PersonalAccessTokenCredential" in repr(client)


class TestEndpointClients:
    """Tests for lazily created endpoint clients."""

    def test_types(self, client):
        """Test each family has its own client type."""
        assert isinstance(client.group_entitlements, GroupEntitlementsClient)
        assert isinstance(client.members, MembersClient)
        assert isinstance(client.user_entitlements, UserEntitlementsClient)
        assert isinstance(client.user_entitlement_summary, UserEntitlementSummaryClient)

    def test_cached(self, client):
        """Test endpoint clients are created once."""
        assert client.members is client.members

    def test_shared_http_context(self, client):
        """Test all endpoint clients share one HTTP context."""
        assert client.members._http is client.http
        assert client.user_entitlements._http is client.http


class TestExecute:
    """Tests for running catalog operations by key."""

    @pytest.mark.asyncio
    async def test_execute_by_key(self):
        """Test a generic call builds the same request as the typed client."""
        transport = RecordingTransport(
            lambda request: httpx.Response(200, json={"members": [], "continuationToken": None})
        )
        client = MemberEntitlementManagementClient(transport=transport)

        result = await client.execute(
            "members.get",
            "contoso",
            path_params={"group_id": "g-1"},
            options={"max_results": 25},
        )

        assert isinstance(result, PagedGraphMemberList)
        assert str(transport.last.url) == (
            f"{API_BASE}/GroupEntitlements/g-1/members?api-version=7.1-preview&maxResults=25"
        )

    @pytest.mark.asyncio
    async def test_unknown_key(self, client):
        """Test unknown operation keys raise KeyError."""
        with pytest.raises(KeyError):
            await client.execute("groups.list", "contoso")

    @pytest.mark.asyncio
    async def test_concurrent_operations(self):
        """Test concurrent calls share the client without interfering."""
        transport = RecordingTransport(lambda request: httpx.Response(200, json={"value": []}))
        client = MemberEntitlementManagementClient(transport=transport)

        results = await asyncio.gather(
            client.group_entitlements.list_raw("contoso"),
            client.group_entitlements.list_raw("fabrikam"),
        )

        assert all(isinstance(result, GroupEntitlementList) for result in results)
        paths = sorted(request.url.path for request in transport.requests)
        assert paths == ["/contoso/_apis/groupentitlements", "/fabrikam/_apis/groupentitlements"]


class TestLifecycle:
    """Tests for session lifecycle."""

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test the async context manager closes the session."""
        transport = RecordingTransport(lambda request: httpx.Response(200, json={"value": []}))

        async with MemberEntitlementManagementClient(transport=transport) as client:
            await client.group_entitlements.list("contoso")
            inner = client.http._client
            assert inner is not None

        assert inner.is_closed
        assert client.http._client is None

    @pytest.mark.asyncio
    async def test_reuse_after_close(self):
        """Test a closed client reopens its session on the next call."""
        transport = RecordingTransport(lambda request: httpx.Response(200, json={"value": []}))
        client = MemberEntitlementManagementClient(transport=transport)

        await client.group_entitlements.list("contoso")
        await client.close()
        await client.group_entitlements.list("contoso")

        assert len(transport.requests) == 2


class TestFromSettings:
    """Tests for configuration-driven construction."""

    def test_from_env(self, monkeypatch):
        """Test environment variables configure the client."""
        monkeypatch.setenv("ADO_ENTITLEMENTS_ENDPOINT", "https://vsaex.example.test")
        monkeypatch.setenv("ADO_PAT", "env-pat")
        monkeypatch.delenv("ADO_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("ADO_TIMEOUT", "12.5")
        monkeypatch.setenv("ADO_MAX_RETRIES", "1")
        monkeypatch.delenv("ADO_SCOPES", raising=False)

        client = MemberEntitlementManagementClient.from_env()

        assert client.endpoint == "https://vsaex.example.test"
        assert client.scopes == ("https://vsaex.example.test/",)
        assert isinstance(client.http.credential, PersonalAccessTokenCredential)
        assert client.http.timeout == 12.5
        assert client.http.max_retries == 1

    def test_keyword_overrides(self, monkeypatch):
        """Test explicit arguments win over settings."""
        monkeypatch.delenv("ADO_ACCESS_TOKEN", raising=False)
        monkeypatch.delenv("ADO_PAT", raising=False)
        credential = BearerTokenCredential("explicit")

        client = MemberEntitlementManagementClient.from_settings(
            EntitlementClientSettings(),
            credential=credential,
            timeout=1.0,
        )

        assert client.http.credential is credential
        assert client.http.timeout == 1.0
