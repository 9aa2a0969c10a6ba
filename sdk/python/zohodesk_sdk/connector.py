"""Connector for the Zoho Desk API."""

import logging
import os
from typing import Any, Dict, List, Optional, Union

import httpx

from . import auth
from .auth import ZohoOAuthToken
from .collection import Collection, Tickets
from .exceptions import ConfigurationError, OrganizationAccessError
from .models import Record, Ticket
from .resources import ResourceDescriptor, get_resource

logger = logging.getLogger(__name__)

API_ROOT = "https://desk.zoho.com/api/v1/"

ResourceRef = Union[str, ResourceDescriptor]


class ZohoDeskConnector:
    """Enables access to the Zoho Desk API for one organization."""

    def __init__(
        self,
        org_id: Union[int, str],
        access_token: str,
        *,
        debug: bool = False,
        timeout: float = 30.0,
        base_url: str = API_ROOT,
        user_agent: str = "zohodesk-python-sdk/1.0.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.org_id = str(org_id)
        self.access_token = access_token
        self.debug = debug
        self.timeout = timeout
        self.base_url = base_url.rstrip("/") + "/"
        self.user_agent = user_agent
        self.auth = ZohoOAuthToken(access_token)

        self._transport = transport
        self._connection: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ZohoDeskConnector":
        """Create a connector from ``ZOHO_DESK_*`` environment variables."""
        org_id = os.environ.get("ZOHO_DESK_ORG_ID")
        if not org_id:
            raise ConfigurationError("ZOHO_DESK_ORG_ID is not set", field="org_id")

        access_token = os.environ.get("ZOHO_DESK_ACCESS_TOKEN")
        if not access_token:
            raise ConfigurationError(
                "ZOHO_DESK_ACCESS_TOKEN is not set", field="access_token"
            )

        if "debug" not in kwargs:
            kwargs["debug"] = os.environ.get("ZOHO_DESK_DEBUG", "").lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        return cls(org_id, access_token, **kwargs)

    @staticmethod
    async def exchange_token(
        client_id: str,
        client_secret: str,
        code: str,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Exchange an authorization code for token data."""
        return await auth.exchange_token(client_id, client_secret, code, **kwargs)

    async def __aenter__(self) -> "ZohoDeskConnector":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP connection, if one was opened."""
        if self._connection is not None:
            await self._connection.aclose()
            self._connection = None

    def _prepare_headers(self) -> Dict[str, str]:
        """Prepare default headers with authentication."""
        headers = {
            "orgId": self.org_id,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        headers.update(self.auth.get_auth_headers())
        return headers

    async def _log_request(self, request: httpx.Request) -> None:
        logger.debug("Request: %s %s", request.method, request.url)

    async def _log_response(self, response: httpx.Response) -> None:
        request = response.request
        logger.debug(
            "Response: %s %s %s", request.method, request.url, response.status_code
        )

    async def _raise_on_error(self, response: httpx.Response) -> None:
        if not response.is_success:
            await response.aread()
            response.raise_for_status()

    def connection(self) -> httpx.AsyncClient:
        """Return the HTTP client, creating it on first use."""
        # No await between the check and the assignment, so coroutines on
        # the same loop always share one client.
        if self._connection is None:
            event_hooks: Dict[str, List[Any]] = {"request": [], "response": []}
            if self.debug:
                event_hooks["request"].append(self._log_request)
                event_hooks["response"].append(self._log_response)
            event_hooks["response"].append(self._raise_on_error)

            self._connection = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._prepare_headers(),
                timeout=httpx.Timeout(self.timeout),
                event_hooks=event_hooks,
                transport=self._transport,
            )
        return self._connection

    read_connection = connection

    @staticmethod
    def _build_params(params: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Filter out None values and convert query values to strings."""
        clean_params: Dict[str, str] = {}
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                clean_params[key] = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                clean_params[key] = ",".join(str(v) for v in value)
            else:
                clean_params[key] = str(value)
        return clean_params

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """Make a GET request relative to the API root."""
        return await self.connection().get(path, params=self._build_params(params))

    async def validate_access(self) -> bool:
        """Check that the token has access to the configured organization.

        Raises ``OrganizationAccessError`` when the organization is missing
        from the token's organizations, and lets ``httpx.HTTPStatusError``
        through when the token is rejected outright.
        """
        response = await self.get("organizations")
        org_ids = [str(org["id"]) for org in response.json()["data"]]
        if self.org_id not in org_ids:
            raise OrganizationAccessError(self.org_id)
        return True

    @staticmethod
    def _resolve(resource: ResourceRef) -> ResourceDescriptor:
        if isinstance(resource, ResourceDescriptor):
            return resource
        return get_resource(resource)

    async def load_collection(
        self,
        resource: ResourceRef,
        batch_offset: int = 1,
        batch_size: int = 100,
        **params: Any,
    ) -> Collection:
        """Load a batch of items from a collection endpoint.

        Extra keyword arguments become query parameters (``status="Open"``,
        ``sortBy="ticketNumber"``) and override ``from``/``limit`` when they
        name them.
        """
        descriptor = self._resolve(resource)
        query: Dict[str, Any] = {"from": batch_offset, "limit": batch_size}
        query.update(params)

        response = await self.get(descriptor.uri_path, params=query)
        return descriptor.collection_class(response)

    async def load_item(self, resource: ResourceRef, item_id: Union[int, str], **params: Any) -> Record:
        """Load a single item by ID."""
        descriptor = self._resolve(resource)
        response = await self.get(f"{descriptor.uri_path}/{item_id}", params=params)
        return descriptor.record_class.model_validate(response.json())

    async def load_tickets(
        self,
        batch_offset: int = 1,
        batch_size: int = 100,
        **params: Any,
    ) -> Tickets:
        """Load a batch of tickets."""
        return await self.load_collection("tickets", batch_offset, batch_size, **params)

    async def load_ticket(self, ticket_id: Union[int, str], **params: Any) -> Ticket:
        """Load a single ticket."""
        return await self.load_item("tickets", ticket_id, **params)

    def generate_item_url(self, _object_name: Any, source_item: Union[Record, Collection]) -> Any:
        """Return the web URL of a record, or the list of URLs of a collection."""
        if isinstance(source_item, Collection):
            return [item.web_url for item in source_item]
        return source_item.web_url

    def parse_core_item_id(self, _object_name: Any, source_item: Union[Record, Collection]) -> Any:
        """Return the ID of a record, or the list of IDs of a collection."""
        if isinstance(source_item, Collection):
            return [item.id for item in source_item]
        return source_item.id
