"""Exception classes for the Zoho Desk SDK.

HTTP failures are not wrapped: they surface as ``httpx.HTTPStatusError`` or
``httpx.TransportError`` straight from the transport layer.
"""

from typing import Optional, Any


class ZohoDeskError(Exception):
    """Base exception for errors raised by the SDK itself."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class OrganizationAccessError(ZohoDeskError):
    """Raised when a valid token has no access to the configured organization."""

    def __init__(self, org_id: str, **kwargs: Any) -> None:
        super().__init__(f"Org ID {org_id} not found in response", **kwargs)
        self.org_id = org_id


class MalformedResponseError(ZohoDeskError, TypeError):
    """Raised when a collection response lacks its ``data`` array."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.status_code:
            base_msg = f"HTTP {self.status_code}: {base_msg}"
        return base_msg


class ConfigurationError(ZohoDeskError):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
