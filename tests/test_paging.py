"""Tests for continuation-token pagination."""

import httpx
import pytest

from ado_entitlements_client.base import collect, iterate_pages
from ado_entitlements_types import PagedGraphMemberList, UserEntitlementSearchQuery

API_BASE = "https://vsaex.dev.azure.com/contoso/_apis"
GROUP_ID = "g-1"


def page(ids, token=None):
    body = {"members": [{"id": member_id} for member_id in ids]}
    if token is not None:
        body["continuationToken"] = token
    return httpx.Response(200, json=body)


class TestIteratePages:
    """Tests for the iterate_pages helper."""

    @pytest.mark.asyncio
    async def test_follows_tokens_until_absent(self):
        """Test pages are fetched until no token is returned."""
        requested = []
        pages = {
            None: PagedGraphMemberList(members=[], continuation_token="a"),
            "a": PagedGraphMemberList(members=[], continuation_token="b"),
            "b": PagedGraphMemberList(members=[]),
        }

        async def fetch(token):
            requested.append(token)
            return pages[token]

        result = await collect(iterate_pages(fetch, lambda p: p.continuation_token))

        assert len(result) == 3
        assert requested == [None, "a", "b"]

    @pytest.mark.asyncio
    async def test_stops_on_repeated_token(self):
        """Test a token the service repeats ends the iteration."""
        requested = []

        async def fetch(token):
            requested.append(token)
            return PagedGraphMemberList(members=[], continuation_token="same")

        result = await collect(iterate_pages(fetch, lambda p: p.continuation_token))

        assert requested == [None, "same"]
        assert len(result) == 2

    @pytest.mark.asyncio
    async def test_max_pages(self):
        """Test the page limit bounds the number of requests."""
        counter = {"n": 0}

        async def fetch(token):
            counter["n"] += 1
            return PagedGraphMemberList(members=[], continuation_token=f"t{counter['n']}")

        result = await collect(iterate_pages(fetch, lambda p: p.continuation_token, max_pages=2))

        assert len(result) == 2
        assert counter["n"] == 2


class TestMembersPaging:
    """Tests for members pagination."""

    @pytest.mark.asyncio
    async def test_get_all(self, client, respx_mock):
        """Test all pages of direct members are collected."""
        route = respx_mock.get(f"{API_BASE}/GroupEntitlements/{GROUP_ID}/members").mock(
            side_effect=[page(["m1", "m2"], "next"), page(["m3"])]
        )

        members = await client.members.get_all("contoso", GROUP_ID)

        assert [member.id for member in members] == ["m1", "m2", "m3"]
        assert route.call_count == 2
        first, second = (call.request.url.params for call in route.calls)
        assert "pagingToken" not in first
        assert second["pagingToken"] == "next"

    @pytest.mark.asyncio
    async def test_iter_pages_passes_max_results(self, client, respx_mock):
        """Test the page size is sent on every request."""
        route = respx_mock.get(f"{API_BASE}/GroupEntitlements/{GROUP_ID}/members").mock(
            side_effect=[page(["m1"], "next"), page(["m2"])]
        )

        pages = [p async for p in client.members.iter_pages("contoso", GROUP_ID, max_results=1)]

        assert len(pages) == 2
        assert all(call.request.url.params["maxResults"] == "1" for call in route.calls)

    @pytest.mark.asyncio
    async def test_get_all_passes_max_results(self, client, respx_mock):
        """Test get_all forwards the page size to every request."""
        route = respx_mock.get(f"{API_BASE}/GroupEntitlements/{GROUP_ID}/members").mock(
            side_effect=[page(["m1"], "next"), page(["m2"])]
        )

        members = await client.members.get_all("contoso", GROUP_ID, max_results=1)

        assert [member.id for member in members] == ["m1", "m2"]
        assert route.call_count == 2
        assert all(call.request.url.params["maxResults"] == "1" for call in route.calls)


class TestUserEntitlementsPaging:
    """Tests for user entitlement search pagination."""

    @pytest.mark.asyncio
    async def test_get_all_keeps_query(self, client, respx_mock):
        """Test the filter is repeated while the token advances."""
        route = respx_mock.get(f"{API_BASE}/userentitlements").mock(
            side_effect=[page(["u1"], "c1"), page(["u2"], "c2"), page([])]
        )

        query = UserEntitlementSearchQuery(filter="licenseId eq 'Account-Express'")
        users = await client.user_entitlements.get_all("contoso", query)

        assert [user.id for user in users] == ["u1", "u2"]
        tokens = [call.request.url.params.get("continuationToken") for call in route.calls]
        assert tokens == [None, "c1", "c2"]
        assert all(
            call.request.url.params["$filter"] == "licenseId eq 'Account-Express'" for call in route.calls
        )

    @pytest.mark.asyncio
    async def test_iter_pages_max_pages(self, client, respx_mock):
        """Test iteration stops at the page limit."""
        route = respx_mock.get(f"{API_BASE}/userentitlements").mock(
            side_effect=[page(["u1"], "c1"), page(["u2"], "c2")]
        )

        pages = [p async for p in client.user_entitlements.iter_pages("contoso", max_pages=1)]

        assert len(pages) == 1
        assert route.call_count == 1
