"""
Lodging GraphQL type definitions
"""

import strawberry


@strawberry.type
class Lodging:
    """Lodging listing with its amenities and pricing.

    Amenity and flag fields (``is_*``, ``with_*``) are integers as stored by
    the lodgings service, not booleans.
    """

    lodging_id: int
    host_id: int
    lodging_name: str
    phone_number: int
    lodging_type: int
    lodging_class: int
    is_exclusive: int
    is_company: int
    guest_number: int
    rooms_number: int
    beds_number: int
    bathrooms_number: int
    location_id: int
    address: str
    extra_address: str
    time_before_guest: int
    time_arrive_start: int
    time_arrive_end: int
    with_wifi: int
    with_cable_tv: int
    with_air_conditioning: int
    with_phone: int
    with_kitchen: int
    with_cleaning_items: int
    price_per_person_and_nigth: float
    lodging_description: str
    lodging_provide: int


@strawberry.input
class LodgingInput:
    host_id: int
    lodging_name: str
    phone_number: int
    lodging_type: int
    lodging_class: int
    is_exclusive: int
    is_company: int
    guest_number: int
    rooms_number: int
    beds_number: int
    bathrooms_number: int
    location_id: int
    address: str
    extra_address: str
    time_before_guest: int
    time_arrive_start: int
    time_arrive_end: int
    with_wifi: int
    with_cable_tv: int
    with_air_conditioning: int
    with_phone: int
    with_kitchen: int
    with_cleaning_items: int
    price_per_person_and_nigth: float
    lodging_description: str
    lodging_provide: int
