"""
Role GraphQL type definitions
"""

import strawberry


@strawberry.type
class Role:
    id: int
    namerole: str


@strawberry.input
class RoleInput:
    namerole: str
