"""
User GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User account as served by the users service."""

    id: int
    name: str
    lastname: str
    birthdate: str
    email: str
    password: str
    idrole: int


@strawberry.input
class UserInput:
    name: str
    lastname: str
    birthdate: str
    email: str
    password: str
    idrole: int
