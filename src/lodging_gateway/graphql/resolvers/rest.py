"""
Generic resolvers forwarding root fields to the upstream REST resources
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

import strawberry

from ...gateway import Entity, Gateway, RestResource

T = TypeVar("T")


def get_resource(info: strawberry.Info, entity: Entity) -> RestResource:
    gateway: Gateway = info.context["gateway"]
    return gateway.resource(entity)


def from_payload(type_: type[T], payload: Any) -> Any:
    """Project upstream JSON onto a GraphQL type.

    Objects keep only the type's declared fields, lists are projected
    element-wise. Anything else, errors returned as data included, is passed
    through for the executor to deal with.
    """
    if isinstance(payload, list):
        return [from_payload(type_, item) for item in payload]
    if isinstance(payload, dict):
        return type_(**{field.name: payload.get(field.name) for field in dataclasses.fields(type_)})
    return payload


async def resolve_all(info: strawberry.Info, entity: Entity, type_: type[T]) -> Any:
    return from_payload(type_, await get_resource(info, entity).all())


async def resolve_by_id(info: strawberry.Info, entity: Entity, type_: type[T], id: int) -> Any:
    return from_payload(type_, await get_resource(info, entity).by_id(id))


async def resolve_create(
    info: strawberry.Info, entity: Entity, type_: type[T], data: Any
) -> Any:
    body = strawberry.asdict(data)
    return from_payload(type_, await get_resource(info, entity).create(body))


async def resolve_update(
    info: strawberry.Info, entity: Entity, type_: type[T], id: int, data: Any
) -> Any:
    body = strawberry.asdict(data)
    return from_payload(type_, await get_resource(info, entity).update(id, body))


async def resolve_delete(info: strawberry.Info, entity: Entity, id: int) -> Any:
    return await get_resource(info, entity).delete(id)
