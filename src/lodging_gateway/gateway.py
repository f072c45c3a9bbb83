"""
Per-entity REST resources and the gateway that owns them
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx

from .config import Settings
from .logging import get_logger
from .upstream import UpstreamClient
from .validation import validate_service_urls

logger = get_logger(__name__)


class Entity(str, Enum):
    """Upstream services fronted by the gateway."""

    USERS = "users"
    ROLES = "roles"
    LOCATIONS = "locations"
    LODGING_IMAGES = "lodging_images"
    LODGINGS = "lodgings"
    RESERVATIONS = "reservations"


class Operation(str, Enum):
    """Operations every upstream service implements."""

    ALL = "all"
    BY_ID = "by_id"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# (entity, operation) -> (root type, GraphQL field name)
ROOT_FIELDS: dict[tuple[Entity, Operation], tuple[str, str]] = {}

_FIELD_NAMES: dict[Entity, tuple[str, str, str, str, str]] = {
    Entity.USERS: ("allUsers", "userById", "createUser", "updateUser", "deleteUser"),
    Entity.ROLES: ("allRoles", "roleById", "createRole", "updateRole", "deleteRole"),
    Entity.LOCATIONS: (
        "allLocations",
        "locationById",
        "createLocation",
        "updateLocation",
        "deleteLocation",
    ),
    Entity.LODGING_IMAGES: (
        "allLodging_image",
        "lodging_imageById",
        "createLodging_image",
        "updateLodging_image",
        "deleteLodging_image",
    ),
    Entity.LODGINGS: (
        "allLodgings",
        "lodgingById",
        "createLodging",
        "updateLodging",
        "deleteLodging",
    ),
    Entity.RESERVATIONS: (
        "allReservations",
        "reservationById",
        "createReservation",
        "updateReservation",
        "deleteReservation",
    ),
}

for _entity, _names in _FIELD_NAMES.items():
    for _operation, _name in zip(Operation, _names, strict=True):
        _root = "Query" if _operation in (Operation.ALL, Operation.BY_ID) else "Mutation"
        ROOT_FIELDS[(_entity, _operation)] = (_root, _name)


class RestResource:
    """One upstream service: maps each operation to a single REST call."""

    def __init__(self, entity: Entity, base_url: str, client: UpstreamClient):
        self.entity = entity
        self.base_url = base_url.rstrip("/")
        self.client = client

    def __repr__(self) -> str:
        return f"RestResource({self.entity.value!r}, {self.base_url!r})"

    async def all(self) -> Any:
        return await self.client.get(
            self.base_url, "", entity=self.entity.value, operation=Operation.ALL.value
        )

    async def by_id(self, id: int) -> Any:
        return await self.client.request(
            f"{self.base_url}/{id}",
            "GET",
            entity=self.entity.value,
            operation=Operation.BY_ID.value,
        )

    async def create(self, body: Mapping[str, Any]) -> Any:
        return await self.client.request(
            self.base_url,
            "POST",
            dict(body),
            entity=self.entity.value,
            operation=Operation.CREATE.value,
        )

    async def update(self, id: int, body: Mapping[str, Any]) -> Any:
        return await self.client.request(
            f"{self.base_url}/{id}",
            "PUT",
            dict(body),
            entity=self.entity.value,
            operation=Operation.UPDATE.value,
        )

    async def delete(self, id: int) -> Any:
        return await self.client.request(
            f"{self.base_url}/{id}",
            "DELETE",
            entity=self.entity.value,
            operation=Operation.DELETE.value,
        )


class Gateway:
    """Resource table shared, read-only, by every request."""

    def __init__(self, resources: Mapping[Entity, RestResource]):
        missing = [entity.value for entity in Entity if entity not in resources]
        if missing:
            raise ValueError(f"No resource configured for: {', '.join(missing)}")
        self._resources = dict(resources)

    def resource(self, entity: Entity) -> RestResource:
        return self._resources[entity]

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Gateway:
        """Build the gateway from validated settings.

        Raises:
            ConfigurationError: If any service URL is missing or malformed.
        """
        urls = validate_service_urls(settings)
        client = UpstreamClient(
            timeout=settings.upstream_timeout,
            show_urls=settings.show_urls,
            errors_as_data=settings.upstream_errors_as_data,
            transport=transport,
        )
        resources = {
            entity: RestResource(entity, urls[entity.value], client) for entity in Entity
        }
        logger.info(
            "Gateway configured",
            services={entity.value: resource.base_url for entity, resource in resources.items()},
        )
        return cls(resources)
