"""
Stitched GraphQL schema built from per-entity fragments using Strawberry
"""

from collections.abc import Sequence
from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLNamedType
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.schema.config import StrawberryConfig
from strawberry.tools import merge_types
from strawberry.types import ExecutionResult

from ..gateway import ROOT_FIELDS, Gateway
from ..logging import get_logger
from .context import build_context
from .errors import SchemaBuildError, format_error
from .mutations.root import MUTATION_FRAGMENTS
from .queries.root import QUERY_FRAGMENTS
from .scalars import JSON
from .types import ENTITY_TYPES

logger = get_logger(__name__)

TYPE_DEFS: tuple[Any, ...] = (JSON, *ENTITY_TYPES)


def _field_names(fragment: type) -> list[str]:
    definition = fragment.__strawberry_definition__  # type: ignore[attr-defined]
    return [field.graphql_name or field.python_name for field in definition.fields]


def _merge_root(name: str, fragments: Sequence[type]) -> type:
    """Combine fragments into one root type; colliding field names are fatal."""
    if not fragments:
        raise SchemaBuildError(f"No fragments supplied for {name}")

    owners: dict[str, str] = {}
    collisions: list[str] = []
    for fragment in fragments:
        for field_name in _field_names(fragment):
            if field_name in owners:
                collisions.append(f"{name}.{field_name} ({owners[field_name]}, {fragment.__name__})")
            else:
                owners[field_name] = fragment.__name__

    if collisions:
        raise SchemaBuildError(f"Duplicate root fields: {', '.join(collisions)}")

    return merge_types(name, tuple(fragments))


def merge_schemas(
    type_defs: Sequence[Any],
    queries: Sequence[type],
    mutations: Sequence[type],
) -> strawberry.Schema:
    """Stitch type definitions, query fragments and mutation fragments into one schema.

    ``type_defs`` may hold Strawberry types and plain graphql-core named types
    such as custom scalars; the latter are registered even when no field
    references them. Field names are neither namespaced nor deduplicated.

    Raises:
        SchemaBuildError: If fragments collide or the result is not a valid schema.
    """
    query = _merge_root("Query", queries)
    mutation = _merge_root("Mutation", mutations)

    strawberry_types = [t for t in type_defs if not isinstance(t, GraphQLNamedType)]
    core_types = [t for t in type_defs if isinstance(t, GraphQLNamedType)]

    try:
        schema = strawberry.Schema(
            query=query,
            mutation=mutation,
            types=strawberry_types,
            config=StrawberryConfig(auto_camel_case=False),
        )
    except Exception as e:
        raise SchemaBuildError(f"GraphQL schema could not be built: {e}") from e

    type_map = schema._schema.type_map
    for core_type in core_types:
        existing = type_map.get(core_type.name)
        if existing is not None and existing is not core_type:
            raise SchemaBuildError(f"Type {core_type.name} is defined more than once")
        type_map[core_type.name] = core_type

    return schema


def build_schema() -> strawberry.Schema:
    """Build the gateway schema from every entity's fragments."""
    return merge_schemas(TYPE_DEFS, QUERY_FRAGMENTS, MUTATION_FRAGMENTS)


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core validation and an introspection query, then checks that
    the (entity, operation) field table and the schema's root fields agree in
    both directions.

    Raises:
        SchemaBuildError: If the schema is invalid or out of step with the field table
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaBuildError(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaBuildError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        roots = {
            "Query": graphql_schema.query_type,
            "Mutation": graphql_schema.mutation_type,
        }
        expected = {root: set() for root in roots}
        for root, field_name in ROOT_FIELDS.values():
            expected[root].add(field_name)

        problems: list[str] = []
        for root, root_type in roots.items():
            actual = set(root_type.fields) if root_type is not None else set()
            for field_name in sorted(expected[root] - actual):
                problems.append(f"{root}.{field_name} missing from schema")
            for field_name in sorted(actual - expected[root]):
                problems.append(f"{root}.{field_name} has no upstream operation")
        if problems:
            raise SchemaBuildError(f"Root fields out of step: {'; '.join(problems)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


class GatewayGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router that formats errors for the upstream error convention."""

    async def process_result(
        self, request: Request, result: ExecutionResult, *args: Any, **kwargs: Any
    ) -> GraphQLHTTPResponse:
        data = await super().process_result(request, result, *args, **kwargs)
        if result.errors:
            data["errors"] = [format_error(err) for err in result.errors]
        return data


def create_graphql_router(schema: strawberry.Schema, gateway: Gateway) -> GatewayGraphQLRouter:
    """Create a GraphQL router for FastAPI bound to ``schema`` and ``gateway``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        context = build_context(request.headers.get("authorization"), gateway)
        context["request"] = request
        return context

    return GatewayGraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql",
        context_getter=get_context,
    )
