"""
Structured logging and per-request gateway accounting
"""

import logging
import secrets
import sys
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Any

import structlog


@dataclass
class RequestContext:
    """What one inbound request has cost upstream so far.

    The object is shared by every resolver task spawned for the request, so
    counters are mutated in place rather than re-set on the context var.
    """

    request_id: str
    upstream_calls: int = 0
    upstream_failures: int = 0
    entities: set[str] = field(default_factory=set)

    def summary(self) -> dict[str, Any]:
        return {
            "upstream_calls": self.upstream_calls,
            "upstream_failures": self.upstream_failures,
            "entities": sorted(self.entities),
        }


_request_ctx: ContextVar[RequestContext | None] = ContextVar("gateway_request", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor stamping events with the current request id."""
    ctx = _request_ctx.get()
    if ctx is not None:
        event_dict.setdefault("request_id", ctx.request_id)
    return event_dict


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Route structlog through stdlib logging.

    Debug mode renders coloured console lines, otherwise one JSON object per
    event. ``log_level`` overrides the level implied by ``debug``; unknown
    names fall back to INFO.
    """
    level = logging.DEBUG if debug else logging.INFO
    if log_level:
        named = logging.getLevelName(log_level.upper())
        level = named if isinstance(named, int) else logging.INFO

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def begin_request(request_id: str | None = None) -> tuple[RequestContext, Token]:
    """Open the accounting context for an inbound request.

    A missing request id is replaced by 16 random hex digits. The returned
    token must be passed to :func:`end_request`.
    """
    ctx = RequestContext(request_id=request_id or secrets.token_hex(8))
    return ctx, _request_ctx.set(ctx)


def end_request(token: Token) -> None:
    _request_ctx.reset(token)


def current_request() -> RequestContext | None:
    return _request_ctx.get()


def record_upstream_call(entity: str | None, *, failed: bool) -> None:
    """Count one outbound REST call against the current request, if any."""
    ctx = _request_ctx.get()
    if ctx is None:
        return
    ctx.upstream_calls += 1
    if failed:
        ctx.upstream_failures += 1
    if entity:
        ctx.entities.add(entity)
