"""
Mutation fragments, one per upstream entity

Each fragment is stitched into the root ``Mutation`` type by the schema builder.
"""

import strawberry

from ...gateway import Entity
from ..resolvers.rest import resolve_create, resolve_delete, resolve_update
from ..types import (
    Location,
    LocationInput,
    Lodging,
    LodgingImage,
    LodgingImageInput,
    LodgingInput,
    Reservation,
    ReservationInput,
    Role,
    RoleInput,
    User,
    UserInput,
)


@strawberry.type
class UserMutation:
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, user: UserInput) -> User:
        return await resolve_create(info, Entity.USERS, User, user)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: int) -> int | None:
        return await resolve_delete(info, Entity.USERS, id)

    @strawberry.mutation(name="updateUser")
    async def update_user(self, info: strawberry.Info, id: int, user: UserInput) -> User:
        return await resolve_update(info, Entity.USERS, User, id, user)


@strawberry.type
class RoleMutation:
    @strawberry.mutation(name="createRole")
    async def create_role(self, info: strawberry.Info, role: RoleInput) -> Role:
        return await resolve_create(info, Entity.ROLES, Role, role)

    @strawberry.mutation(name="deleteRole")
    async def delete_role(self, info: strawberry.Info, id: int) -> int | None:
        return await resolve_delete(info, Entity.ROLES, id)

    @strawberry.mutation(name="updateRole")
    async def update_role(self, info: strawberry.Info, id: int, role: RoleInput) -> Role:
        return await resolve_update(info, Entity.ROLES, Role, id, role)


@strawberry.type
class LocationMutation:
    @strawberry.mutation(name="createLocation")
    async def create_location(self, info: strawberry.Info, location: LocationInput) -> Location:
        return await resolve_create(info, Entity.LOCATIONS, Location, location)

    @strawberry.mutation(name="deleteLocation")
    async def delete_location(self, info: strawberry.Info, location_id: int) -> int | None:
        return await resolve_delete(info, Entity.LOCATIONS, location_id)

    @strawberry.mutation(name="updateLocation")
    async def update_location(
        self, info: strawberry.Info, location_id: int, location: LocationInput
    ) -> Location:
        return await resolve_update(info, Entity.LOCATIONS, Location, location_id, location)


@strawberry.type
class LodgingImageMutation:
    @strawberry.mutation(name="createLodging_image")
    async def create_lodging_image(
        self, info: strawberry.Info, lodging_image: LodgingImageInput
    ) -> LodgingImage:
        return await resolve_create(info, Entity.LODGING_IMAGES, LodgingImage, lodging_image)

    @strawberry.mutation(name="deleteLodging_image")
    async def delete_lodging_image(
        self, info: strawberry.Info, lodging_image_id: int
    ) -> int | None:
        return await resolve_delete(info, Entity.LODGING_IMAGES, lodging_image_id)

    @strawberry.mutation(name="updateLodging_image")
    async def update_lodging_image(
        self, info: strawberry.Info, lodging_image_id: int, lodging_image: LodgingImageInput
    ) -> LodgingImage:
        return await resolve_update(
            info, Entity.LODGING_IMAGES, LodgingImage, lodging_image_id, lodging_image
        )


@strawberry.type
class LodgingMutation:
    @strawberry.mutation(name="createLodging")
    async def create_lodging(self, info: strawberry.Info, lodging: LodgingInput) -> Lodging:
        return await resolve_create(info, Entity.LODGINGS, Lodging, lodging)

    @strawberry.mutation(name="deleteLodging")
    async def delete_lodging(self, info: strawberry.Info, lodging_id: int) -> int | None:
        return await resolve_delete(info, Entity.LODGINGS, lodging_id)

    @strawberry.mutation(name="updateLodging")
    async def update_lodging(
        self, info: strawberry.Info, lodging_id: int, lodging: LodgingInput
    ) -> Lodging:
        return await resolve_update(info, Entity.LODGINGS, Lodging, lodging_id, lodging)


@strawberry.type
class ReservationMutation:
    @strawberry.mutation(name="createReservation")
    async def create_reservation(
        self, info: strawberry.Info, reservation: ReservationInput
    ) -> Reservation:
        return await resolve_create(info, Entity.RESERVATIONS, Reservation, reservation)

    @strawberry.mutation(name="deleteReservation")
    async def delete_reservation(self, info: strawberry.Info, id: int) -> int | None:
        return await resolve_delete(info, Entity.RESERVATIONS, id)

    @strawberry.mutation(name="updateReservation")
    async def update_reservation(
        self, info: strawberry.Info, id: int, reservation: ReservationInput
    ) -> Reservation:
        return await resolve_update(info, Entity.RESERVATIONS, Reservation, id, reservation)


MUTATION_FRAGMENTS = (
    UserMutation,
    RoleMutation,
    LocationMutation,
    LodgingImageMutation,
    LodgingMutation,
    ReservationMutation,
)
