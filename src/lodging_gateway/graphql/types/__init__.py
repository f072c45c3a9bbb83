"""GraphQL object and input types, one module per upstream entity."""

from .location import Location, LocationInput
from .lodging import Lodging, LodgingInput
from .lodging_image import LodgingImage, LodgingImageInput
from .reservation import Reservation, ReservationInput
from .role import Role, RoleInput
from .user import User, UserInput

# Schema order: roles first, matching the stitched type definitions.
ENTITY_TYPES = (Role, User, Location, LodgingImage, Lodging, Reservation)

__all__ = [
    "ENTITY_TYPES",
    "Location",
    "LocationInput",
    "Lodging",
    "LodgingImage",
    "LodgingImageInput",
    "LodgingInput",
    "Reservation",
    "ReservationInput",
    "Role",
    "RoleInput",
    "User",
    "UserInput",
]
