"""
Reservation GraphQL type definitions
"""

import strawberry


@strawberry.type
class Reservation:
    """Booking made by a user."""

    reservation_id: int
    user_id: int
    start_date: str
    end_date: str
    guest_adult_number: int
    guest_children_number: int
    is_cancel: bool


@strawberry.input
class ReservationInput:
    user_id: int
    start_date: str
    end_date: str
    guest_adult_number: int
    guest_children_number: int
    is_cancel: bool
