"""
Inbound request logging

Each request to ``/graphql`` is logged with the operation it runs, the root
fields it selects and the upstream entities those fields fan out to. On
completion the request's upstream call count is logged next to its status.
"""

import json
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import Request, Response
from graphql import FieldNode, GraphQLError, OperationDefinitionNode, parse
from starlette.middleware.base import BaseHTTPMiddleware

from .gateway import ROOT_FIELDS
from .logging import begin_request, end_request, get_logger

logger = get_logger(__name__)

_ENTITY_BY_FIELD = {
    field_name: entity.value for (entity, _), (_, field_name) in ROOT_FIELDS.items()
}


@dataclass(frozen=True)
class DocumentSummary:
    operation: str
    root_fields: tuple[str, ...]

    @property
    def entities(self) -> list[str]:
        return sorted({_ENTITY_BY_FIELD[f] for f in self.root_fields if f in _ENTITY_BY_FIELD})


def summarize_document(query: Any, operation_name: Any = None) -> DocumentSummary | None:
    """Name the operation a GraphQL document runs and list its root fields.

    ``operation`` reads ``"query"``, ``"mutation"`` or, for named operations,
    ``"query AllRoles"``. Returns None when the document does not parse or the
    operation to run cannot be picked; the executor reports those cases.
    """
    if not isinstance(query, str) or not query:
        return None
    try:
        document = parse(query)
    except GraphQLError:
        return None

    operations = [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]
    if isinstance(operation_name, str) and operation_name:
        operations = [op for op in operations if op.name and op.name.value == operation_name]
    if len(operations) != 1:
        return None

    op = operations[0]
    label = op.operation.value
    if op.name:
        label = f"{label} {op.name.value}"
    root_fields = tuple(
        selection.name.value
        for selection in op.selection_set.selections
        if isinstance(selection, FieldNode)
    )
    return DocumentSummary(label, root_fields)


async def read_graphql_payload(request: Request) -> dict[str, Any]:
    """GraphQL request parameters from the query string (GET) or JSON body (POST)."""
    if request.method == "GET":
        return dict(request.query_params)
    if request.method != "POST":
        return {}
    try:
        data = json.loads(await request.body() or b"null")
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class GatewayRequestMiddleware(BaseHTTPMiddleware):
    """Opens the per-request accounting context and logs each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        ctx, token = begin_request(request.headers.get("x-request-id"))
        started = time.perf_counter()

        try:
            if request.url.path == "/graphql":
                payload = await read_graphql_payload(request)
                summary = summarize_document(payload.get("query"), payload.get("operationName"))
                if summary is not None:
                    logger.info(
                        "GraphQL request",
                        operation=summary.operation,
                        root_fields=list(summary.root_fields),
                        entities=summary.entities,
                    )

            response = await call_next(request)

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
                **ctx.summary(),
            )
            response.headers["X-Request-ID"] = ctx.request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                **ctx.summary(),
            )
            raise

        finally:
            end_request(token)
