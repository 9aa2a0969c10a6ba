from urllib.parse import parse_qs

import httpx
import pytest

from zohodesk_sdk import ZohoDeskConnector
from zohodesk_sdk.auth import ZohoOAuthToken, exchange_token, refresh_access_token

TOKEN_BODY = {
    "access_token": "1000.ec28c13539d0f637ec7fed900c907003.35525fe16cef5fb459c88469a822ed1b",
    "refresh_token": "1000.1e5affc72eb0efd2659739df6d07358e.b202e424e52a5dffaad244bde2d1404a",
    "api_domain": "https://www.zohoapis.com",
    "token_type": "Bearer",
    "expires_in": 3600,
}


def form_of(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def test_oauth_headers():
    token = ZohoOAuthToken("abc")

    assert token.get_auth_headers() == {"Authorization": "Zoho-oauthtoken abc"}
    assert vars(token) == {"access_token": "abc"}
    assert "abc" not in repr(token)


@pytest.mark.asyncio
async def test_exchange_token(make_transport, sent_requests):
    transport = make_transport(lambda request: httpx.Response(200, json=TOKEN_BODY))

    result = await ZohoDeskConnector.exchange_token(
        "client-id", "client-secret", "grant-code", transport=transport
    )

    assert result == TOKEN_BODY
    [request] = sent_requests
    assert request.method == "POST"
    assert str(request.url) == "https://accounts.zoho.com/oauth/v2/token"
    assert form_of(request) == {
        "client_id": "client-id",
        "client_secret": "client-secret",
        "code": "grant-code",
        "grant_type": "authorization_code",
    }


@pytest.mark.asyncio
async def test_exchange_token_returns_body_verbatim(make_transport):
    body = {"error": "invalid_code"}
    transport = make_transport(lambda request: httpx.Response(200, json=body))

    assert await exchange_token("id", "secret", "used-code", transport=transport) == body


@pytest.mark.asyncio
async def test_exchange_token_propagates_http_errors(make_transport):
    transport = make_transport(lambda request: httpx.Response(500))

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        await exchange_token("id", "secret", "code", transport=transport)

    assert excinfo.value.response.status_code == 500


@pytest.mark.asyncio
async def test_refresh_access_token(make_transport, sent_requests):
    transport = make_transport(lambda request: httpx.Response(200, json=TOKEN_BODY))

    result = await refresh_access_token(
        "client-id",
        "client-secret",
        "1000.refresh",
        accounts_url="https://accounts.zoho.eu",
        transport=transport,
    )

    assert result["access_token"] == TOKEN_BODY["access_token"]
    [request] = sent_requests
    assert str(request.url) == "https://accounts.zoho.eu/oauth/v2/token"
    assert form_of(request)["grant_type"] == "refresh_token"
    assert form_of(request)["refresh_token"] == "1000.refresh"
