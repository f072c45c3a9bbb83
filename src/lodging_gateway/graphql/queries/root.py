"""
Query fragments, one per upstream entity

Each fragment is stitched into the root ``Query`` type by the schema builder.
"""

import strawberry

from ...gateway import Entity
from ..resolvers.rest import resolve_all, resolve_by_id
from ..types import Location, Lodging, LodgingImage, Reservation, Role, User


@strawberry.type
class UserQuery:
    @strawberry.field(name="allUsers")
    async def all_users(self, info: strawberry.Info) -> list[User | None]:
        return await resolve_all(info, Entity.USERS, User)

    @strawberry.field(name="userById")
    async def user_by_id(self, info: strawberry.Info, id: int) -> User:
        return await resolve_by_id(info, Entity.USERS, User, id)


@strawberry.type
class RoleQuery:
    @strawberry.field(name="allRoles")
    async def all_roles(self, info: strawberry.Info) -> list[Role | None]:
        return await resolve_all(info, Entity.ROLES, Role)

    @strawberry.field(name="roleById")
    async def role_by_id(self, info: strawberry.Info, id: int) -> Role:
        return await resolve_by_id(info, Entity.ROLES, Role, id)


@strawberry.type
class LocationQuery:
    @strawberry.field(name="allLocations")
    async def all_locations(self, info: strawberry.Info) -> list[Location | None]:
        return await resolve_all(info, Entity.LOCATIONS, Location)

    @strawberry.field(name="locationById")
    async def location_by_id(self, info: strawberry.Info, location_id: int) -> Location:
        return await resolve_by_id(info, Entity.LOCATIONS, Location, location_id)


@strawberry.type
class LodgingImageQuery:
    @strawberry.field(name="allLodging_image")
    async def all_lodging_images(self, info: strawberry.Info) -> list[LodgingImage | None]:
        return await resolve_all(info, Entity.LODGING_IMAGES, LodgingImage)

    @strawberry.field(name="lodging_imageById")
    async def lodging_image_by_id(
        self, info: strawberry.Info, lodging_image_id: int
    ) -> LodgingImage:
        return await resolve_by_id(info, Entity.LODGING_IMAGES, LodgingImage, lodging_image_id)


@strawberry.type
class LodgingQuery:
    @strawberry.field(name="allLodgings")
    async def all_lodgings(self, info: strawberry.Info) -> list[Lodging | None]:
        return await resolve_all(info, Entity.LODGINGS, Lodging)

    @strawberry.field(name="lodgingById")
    async def lodging_by_id(self, info: strawberry.Info, lodging_id: int) -> Lodging:
        return await resolve_by_id(info, Entity.LODGINGS, Lodging, lodging_id)


@strawberry.type
class ReservationQuery:
    @strawberry.field(name="allReservations")
    async def all_reservations(self, info: strawberry.Info) -> list[Reservation | None]:
        return await resolve_all(info, Entity.RESERVATIONS, Reservation)

    @strawberry.field(name="reservationById")
    async def reservation_by_id(self, info: strawberry.Info, id: int) -> Reservation:
        return await resolve_by_id(info, Entity.RESERVATIONS, Reservation, id)


QUERY_FRAGMENTS = (
    UserQuery,
    RoleQuery,
    LocationQuery,
    LodgingImageQuery,
    LodgingQuery,
    ReservationQuery,
)
