"""Collection wrappers for Zoho Desk list responses."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Iterator, List, Type, Union, overload

import httpx

from .exceptions import MalformedResponseError
from .models import Record, Ticket

logger = logging.getLogger(__name__)


class Collection(Sequence):
    """Read-only sequence of records built from one collection response.

    A ``204 No Content`` response yields an empty collection. Any other
    response must carry a ``data`` array, one record per element.
    """

    record_class: ClassVar[Type[Record]] = Record

    def __init__(self, response: httpx.Response) -> None:
        if response.status_code == 204:
            self._entries: List[Record] = []
            return

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "Collection response body is not JSON",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if not isinstance(body, Mapping) or not isinstance(body.get("data"), list):
            raise MalformedResponseError(
                "Collection response has no 'data' array",
                status_code=response.status_code,
                body=body,
            )
        if not all(isinstance(item, Mapping) for item in body["data"]):
            raise MalformedResponseError(
                "Collection 'data' array must contain objects",
                status_code=response.status_code,
                body=body,
            )

        self._entries = [self.record_class.model_validate(item) for item in body["data"]]
        logger.debug(
            "Loaded %d %s record(s)", len(self._entries), self.record_class.__name__
        )

    @property
    def entries(self) -> List[Record]:
        """Records in response order, as a new list."""
        return list(self._entries)

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> List[Record]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._entries)} records)"


class Tickets(Collection):
    """Zoho Desk tickets collection."""

    record_class = Ticket
