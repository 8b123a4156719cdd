"""Tests for the httpx authentication helpers."""

import httpx
import pytest
from oauth2_request.account import Account
from oauth2_request.errors import InvalidArgumentError, InvalidCredentialError
from oauth2_request.security.httpx_auth import OAuth2BearerAuth, OAuth2QueryAuth


@pytest.fixture
def account():
    return Account("user", {"access_token": "abc123"})


@pytest.fixture
def sent():
    return []


@pytest.fixture
def transport(sent):
    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)


def test_bearer_auth_sets_header(account, transport, sent):
    with httpx.Client(transport=transport, auth=OAuth2BearerAuth(account)) as client:
        response = client.get("https://api.example.com/data")

    assert response.status_code == 200
    assert sent[0].headers["Authorization"] == "Bearer abc123"
    assert str(sent[0].url) == "https://api.example.com/data"


def test_bearer_auth_keeps_existing_header(account, transport, sent):
    with httpx.Client(transport=transport, auth=OAuth2BearerAuth(account)) as client:
        client.get(
            "https://api.example.com/data", headers={"Authorization": "Basic xyz"}
        )
    assert sent[0].headers["Authorization"] == "Basic xyz"


def test_query_auth_rewrites_url(account, transport, sent):
    auth = OAuth2QueryAuth(account, "oauth_token")
    with httpx.Client(transport=transport, auth=auth) as client:
        client.get("https://api.example.com/data", params={"x": "1"})

    assert str(sent[0].url) == "https://api.example.com/data?x=1&oauth_token=abc123"
    assert "Authorization" not in sent[0].headers


def test_bearer_auth_missing_token_fails_before_sending(transport, sent):
    with httpx.Client(transport=transport, auth=OAuth2BearerAuth(Account())) as client:
        with pytest.raises(InvalidCredentialError):
            client.get("https://api.example.com/data")
    assert sent == []


def test_query_auth_without_account(transport, sent):
    with httpx.Client(transport=transport, auth=OAuth2QueryAuth(None)) as client:
        with pytest.raises(InvalidArgumentError):
            client.get("https://api.example.com/data")
    assert sent == []


@pytest.mark.asyncio
async def test_bearer_auth_async_client(account, transport, sent):
    async with httpx.AsyncClient(
        transport=transport, auth=OAuth2BearerAuth(account)
    ) as client:
        response = await client.get("https://api.example.com/data")

    assert response.json() == {"ok": True}
    assert sent[0].headers["Authorization"] == "Bearer abc123"


@pytest.mark.asyncio
async def test_query_auth_async_client(account, transport, sent):
    async with httpx.AsyncClient(
        transport=transport, auth=OAuth2QueryAuth(account)
    ) as client:
        await client.get("https://api.example.com/data")

    assert sent[0].url.params["access_token"] == "abc123"
