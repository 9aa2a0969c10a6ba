"""Authentication helpers for the Zoho Desk SDK."""

import logging
from typing import Optional, Dict, Any

import httpx

logger = logging.getLogger(__name__)

ACCOUNTS_URL = "https://accounts.zoho.com"
TOKEN_PATH = "/oauth/v2/token"


class ZohoOAuthToken:
    """Zoho OAuth2 access token authentication."""

    token_type = "Zoho-oauthtoken"

    def __init__(self, access_token: str) -> None:
        self.access_token = access_token

    def get_auth_headers(self) -> Dict[str, str]:
        """Get OAuth2 authorization headers."""
        return {"Authorization": f"{self.token_type} {self.access_token}"}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(access_token='***')"


async def _request_token(
    form: Dict[str, str],
    accounts_url: str,
    transport: Optional[httpx.AsyncBaseTransport],
) -> Dict[str, Any]:
    async with httpx.AsyncClient(base_url=accounts_url, transport=transport) as client:
        logger.debug("POST %s%s grant_type=%s", accounts_url, TOKEN_PATH, form["grant_type"])
        response = await client.post(TOKEN_PATH, data=form)
        response.raise_for_status()
        return response.json()


async def exchange_token(
    client_id: str,
    client_secret: str,
    code: str,
    *,
    accounts_url: str = ACCOUNTS_URL,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Exchange an authorization code for an access token.

    Returns the decoded token endpoint body as-is, e.g.::

        {
            "access_token": "1000.ec28...",
            "refresh_token": "1000.1e5a...",
            "api_domain": "https://www.zohoapis.com",
            "token_type": "Bearer",
            "expires_in": 3600,
        }
    """
    return await _request_token(
        {
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "grant_type": "authorization_code",
        },
        accounts_url,
        transport,
    )


async def refresh_access_token(
    client_id: str,
    client_secret: str,
    refresh_token: str,
    *,
    accounts_url: str = ACCOUNTS_URL,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Get a new access token for a refresh token."""
    return await _request_token(
        {
            "client_id": client_id,
            "client_secret": client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        },
        accounts_url,
        transport,
    )
