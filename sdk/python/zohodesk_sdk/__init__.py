"""
Zoho Desk Python SDK

Python client for the Zoho Desk REST API.

Basic usage:
    >>> from zohodesk_sdk import ZohoDeskConnector
    >>> connector = ZohoDeskConnector("123456", "1000.ec28c135...")
    >>> await connector.validate_access()
    True
    >>> tickets = await connector.load_tickets(status="Open")
    >>> print([ticket.ticket_number for ticket in tickets])

Authentication:
    # Authorization code from the Zoho API console
    token = await ZohoDeskConnector.exchange_token(client_id, client_secret, code)
    connector = ZohoDeskConnector(org_id, token["access_token"])

    # Environment (ZOHO_DESK_ORG_ID, ZOHO_DESK_ACCESS_TOKEN, ZOHO_DESK_DEBUG)
    connector = ZohoDeskConnector.from_env()
"""

import httpx

from .connector import ZohoDeskConnector, API_ROOT
from .exceptions import (
    ZohoDeskError,
    OrganizationAccessError,
    MalformedResponseError,
    ConfigurationError,
)
from .models import Record, Ticket
from .collection import Collection, Tickets
from .resources import (
    ResourceDescriptor,
    register_resource,
    unregister_resource,
    get_resource,
    resources,
)
from .inflections import normalize_keys, underscore, pluralize, singularize
from .auth import ZohoOAuthToken, exchange_token, refresh_access_token

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main connector
    "ZohoDeskConnector",
    "API_ROOT",
    # Exceptions
    "ZohoDeskError",
    "OrganizationAccessError",
    "MalformedResponseError",
    "ConfigurationError",
    # Models
    "Record",
    "Ticket",
    "Collection",
    "Tickets",
    # Resources
    "ResourceDescriptor",
    "register_resource",
    "unregister_resource",
    "get_resource",
    "resources",
    # Normalization
    "normalize_keys",
    "underscore",
    "pluralize",
    "singularize",
    # Auth
    "ZohoOAuthToken",
    "exchange_token",
    "refresh_access_token",
]

# Convenience functions for error checking
def is_zohodesk_error(error: Exception) -> bool:
    """Check if an exception was raised by the SDK itself."""
    return isinstance(error, ZohoDeskError)

def is_access_error(error: Exception) -> bool:
    """Check if an exception means the token cannot see the organization."""
    return isinstance(error, OrganizationAccessError)

def is_malformed_response_error(error: Exception) -> bool:
    """Check if an exception is a malformed collection response."""
    return isinstance(error, MalformedResponseError)

def is_http_status_error(error: Exception) -> bool:
    """Check if an exception is an HTTP error response from the API."""
    return isinstance(error, httpx.HTTPStatusError)
