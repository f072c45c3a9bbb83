"""
Custom scalars registered on the stitched schema
"""

from typing import Any

from graphql import GraphQLScalarType, ValueNode, value_from_ast_untyped


def _identity(value: Any) -> Any:
    return value


def _parse_literal(value_node: ValueNode, variables: dict[str, Any] | None = None) -> Any:
    return value_from_ast_untyped(value_node, variables)


# Unstructured values pass through unchanged in both directions.
JSON = GraphQLScalarType(
    name="JSON",
    description="Arbitrary JSON value, passed through unchanged.",
    serialize=_identity,
    parse_value=_identity,
    parse_literal=_parse_literal,
)
