"""Data models for the Zoho Desk API."""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .inflections import normalize_keys


def _wrap_nested(value: Any) -> Any:
    """Wrap nested mappings with the generic ``Record``."""
    if isinstance(value, Record):
        return value
    if isinstance(value, Mapping):
        return Record.model_validate(value)
    if isinstance(value, list):
        return [_wrap_nested(item) for item in value]
    return value


class Record(BaseModel):
    """Base model for all Zoho Desk API records.

    Keys are normalized to snake_case on the way in. Fields the model does not
    declare are kept as extras and are readable as attributes, and reading a
    field the API never sent returns ``None``.
    """

    model_config = ConfigDict(
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_source(cls, data: Any) -> Any:
        if isinstance(data, Record):
            # Already normalized, reuse the stored values
            return dict(data)
        if isinstance(data, Mapping):
            return normalize_keys(data)
        return data

    @model_validator(mode="after")
    def wrap_nested_values(self) -> "Record":
        for key, value in self.__dict__.items():
            self.__dict__[key] = _wrap_nested(value)
        if self.__pydantic_extra__:
            for key, value in self.__pydantic_extra__.items():
                self.__pydantic_extra__[key] = _wrap_nested(value)
        return self

    def __getattr__(self, name: str) -> Any:
        try:
            return super().__getattr__(name)
        except AttributeError:
            if name.startswith("_"):
                raise
            return None

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field value, or ``default`` when the field is absent."""
        value = getattr(self, name)
        return default if value is None else value

    def to_dict(self) -> Dict[str, Any]:
        """Return the normalized fields as plain Python data."""
        return self.model_dump()


class Ticket(Record):
    """Represents a Zoho Desk ticket.

    Common fields are declared for discoverability only. Values are stored as
    the API sent them.
    """

    id: Optional[Any] = None
    ticket_number: Optional[Any] = None
    subject: Optional[Any] = None
    status: Optional[Any] = None
    status_type: Optional[Any] = None
    priority: Optional[Any] = None
    channel: Optional[Any] = None
    email: Optional[Any] = None
    phone: Optional[Any] = None
    department_id: Optional[Any] = None
    contact_id: Optional[Any] = None
    assignee_id: Optional[Any] = None
    created_time: Optional[Any] = None
    modified_time: Optional[Any] = None
    due_date: Optional[Any] = None
    web_url: Optional[Any] = None
    is_spam: Optional[Any] = None
    thread_count: Optional[Any] = None
    contact: Optional[Any] = None
    assignee: Optional[Any] = None
    custom_fields: Optional[Any] = None
    cf: Optional[Any] = None
