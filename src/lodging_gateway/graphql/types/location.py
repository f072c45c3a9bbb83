"""
Location GraphQL type definitions
"""

import strawberry


@strawberry.type
class Location:
    """Place a lodging belongs to."""

    location_id: int
    country: str
    city: str
    state: str


@strawberry.input
class LocationInput:
    country: str
    city: str
    state: str
