"""
GraphQL error types and client-facing error formatting
"""

from typing import Any

from graphql import GraphQLError

from ..upstream import UpstreamError


class SchemaBuildError(Exception):
    """Raised when the stitched schema cannot be built or fails validation."""

    pass


def format_error(error: GraphQLError) -> dict[str, Any]:
    """Shape a GraphQL execution error for the client.

    Upstream services report failures with a JSON body ``{"id", "code",
    "description"}``. When the original exception carries that body as its
    ``error`` attribute it is projected to ``{message, code, description,
    path}``; anything else keeps graphql-core's formatting.
    """
    formatted: dict[str, Any] = dict(error.formatted)
    original = error.original_error

    body = getattr(original, "error", None)
    if isinstance(body, dict):
        return {
            "message": body.get("id"),
            "code": body.get("code"),
            "description": body.get("description"),
            "path": formatted.get("path"),
        }

    if isinstance(original, UpstreamError):
        formatted["extensions"] = {**formatted.get("extensions", {}), **original.extensions}

    return formatted
