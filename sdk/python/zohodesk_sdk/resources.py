"""Registry of the Zoho Desk resource families the connector can load."""

import logging
from typing import Dict, List, Type

from pydantic import BaseModel, ConfigDict

from .collection import Collection, Tickets
from .exceptions import ConfigurationError
from .inflections import is_uncountable, singularize, underscore
from .models import Record

logger = logging.getLogger(__name__)


class ResourceDescriptor(BaseModel):
    """A resource family: plural name, endpoint path and collection type."""

    model_config = ConfigDict(frozen=True)

    name: str
    uri_path: str
    collection_class: Type[Collection]

    @property
    def singular_name(self) -> str:
        return singularize(self.name)

    @property
    def record_class(self) -> Type[Record]:
        return self.collection_class.record_class


_REGISTRY: Dict[str, ResourceDescriptor] = {}


def register_resource(
    name: str,
    uri_path: str,
    collection_class: Type[Collection],
) -> ResourceDescriptor:
    """Declare a resource family.

    ``name`` must be a snake_case plural with a distinct singular form, and
    neither form may clash with a family that is already registered.
    """
    if not name or underscore(name) != name:
        raise ConfigurationError(
            f"Resource name {name!r} must be snake_case", field="name"
        )
    if is_uncountable(name) or singularize(name) == name:
        raise ConfigurationError(
            f"Resource name {name!r} has no distinct singular form", field="name"
        )

    descriptor = ResourceDescriptor(
        name=name, uri_path=uri_path, collection_class=collection_class
    )
    taken = {
        existing_name
        for existing in _REGISTRY.values()
        for existing_name in (existing.name, existing.singular_name)
    }
    for candidate in (descriptor.name, descriptor.singular_name):
        if candidate in taken:
            raise ConfigurationError(
                f"Resource name {candidate!r} is already registered", field="name"
            )

    _REGISTRY[name] = descriptor
    logger.debug("Registered resource %s -> %s", name, uri_path)
    return descriptor


def unregister_resource(name: str) -> None:
    """Remove a resource family registered under ``name``."""
    _REGISTRY.pop(get_resource(name).name)


def get_resource(name: str) -> ResourceDescriptor:
    """Look up a resource family by its plural or singular name."""
    if name in _REGISTRY:
        return _REGISTRY[name]
    for descriptor in _REGISTRY.values():
        if descriptor.singular_name == name:
            return descriptor
    raise ConfigurationError(f"Unknown resource {name!r}", field="name")


def resources() -> List[ResourceDescriptor]:
    """Return all registered resource families in registration order."""
    return list(_REGISTRY.values())


TICKETS = register_resource("tickets", "tickets", Tickets)
