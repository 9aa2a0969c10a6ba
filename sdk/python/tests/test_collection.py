import httpx
import pytest

from zohodesk_sdk.collection import Collection, Tickets
from zohodesk_sdk.exceptions import MalformedResponseError, ZohoDeskError
from zohodesk_sdk.models import Record, Ticket

from .conftest import ticket_payload


def test_no_content_response_is_empty():
    tickets = Tickets(httpx.Response(204))

    assert len(tickets) == 0
    assert list(vars(tickets)) == ["_entries"]
    assert list(tickets) == []


def test_no_content_ignores_body():
    tickets = Tickets(httpx.Response(204, json={"data": [ticket_payload("1")]}))

    assert len(tickets) == 0


def test_records_follow_response_order():
    response = httpx.Response(
        200, json={"data": [{"ticketNumber": "1"}, {"ticketNumber": "2"}]}
    )
    tickets = Tickets(response)

    assert len(tickets) == 2
    assert [t.ticket_number for t in tickets] == ["1", "2"]
    assert all(isinstance(t, Ticket) for t in tickets)


def test_generic_collection_uses_base_record():
    collection = Collection(httpx.Response(200, json={"data": [{"someKey": 1}]}))

    assert type(collection[0]) is Record
    assert collection[0].some_key == 1


def test_sequence_access():
    tickets = Tickets(
        httpx.Response(200, json={"data": [ticket_payload(n) for n in ("1", "2", "3")]})
    )

    assert tickets[0].ticket_number == "1"
    assert tickets[-1].ticket_number == "3"
    assert [t.ticket_number for t in tickets[1:]] == ["2", "3"]
    assert tickets[1] in tickets
    # The entries are held, not consumed
    assert [t.id for t in tickets] == [t.id for t in tickets]


def test_collection_cannot_be_mutated():
    tickets = Tickets(httpx.Response(200, json={"data": [ticket_payload("1")]}))

    with pytest.raises(TypeError):
        tickets[0] = Ticket()
    tickets.entries.clear()
    assert len(tickets) == 1


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"data": None},
        {"data": {"ticketNumber": "1"}},
        {"data": [1, 2]},
        [{"ticketNumber": "1"}],
    ],
)
def test_malformed_body_raises(body):
    with pytest.raises(MalformedResponseError) as excinfo:
        Tickets(httpx.Response(200, json=body))

    assert isinstance(excinfo.value, TypeError)
    assert isinstance(excinfo.value, ZohoDeskError)
    assert excinfo.value.status_code == 200
    assert "HTTP 200" in str(excinfo.value)


@pytest.mark.parametrize("content", [b"", b"<html>Service Unavailable</html>"])
def test_non_json_body_raises(content):
    with pytest.raises(MalformedResponseError) as excinfo:
        Tickets(httpx.Response(200, content=content))

    assert excinfo.value.status_code == 200
    assert excinfo.value.body == content.decode()
