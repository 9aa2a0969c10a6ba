"""
Pytest configuration for the Zoho Desk SDK tests.

HTTP traffic never leaves the process: connectors are built on an
``httpx.MockTransport`` and every request they send is recorded.
"""

from typing import Callable, List

import httpx
import pytest

from zohodesk_sdk import ZohoDeskConnector

ORG_ID = "123456"
ACCESS_TOKEN = "1000.test-access-token"


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_transport(sent_requests):
    """Build a recording mock transport around a request handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        return httpx.MockTransport(recording_handler)

    return _make


@pytest.fixture
def make_connector(make_transport):
    """Build a connector whose HTTP traffic goes to ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> ZohoDeskConnector:
        return ZohoDeskConnector(
            ORG_ID, ACCESS_TOKEN, transport=make_transport(handler), **kwargs
        )

    return _make


def ticket_payload(number: str, **extra) -> dict:
    """A ticket object shaped like the Zoho Desk API returns it."""
    payload = {
        "id": f"1892000000{number}",
        "ticketNumber": number,
        "subject": f"Ticket {number}",
        "status": "Open",
        "webUrl": f"https://desk.zoho.com/support/acme/ShowHomePage.do#Cases/dv/{number}",
    }
    payload.update(extra)
    return payload
