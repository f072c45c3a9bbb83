"""Exceptions raised by the upstream REST client."""

from __future__ import annotations

from typing import Any


class UpstreamError(Exception):
    """Raised when a call to an upstream REST service fails.

    Covers both transport failures (``status_code`` is None) and non-2xx
    responses, in which case ``payload`` holds the decoded response body.
    """

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        operation: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.operation = operation
        self.url = url
        self.status_code = status_code
        self.payload = payload

    @property
    def error(self) -> dict[str, Any] | None:
        """Upstream error body, when the service answered with a JSON object.

        Services report failures as ``{"id", "code", "description"}`` at the
        top level of the response body.
        """
        if isinstance(self.payload, dict):
            return self.payload
        return None

    @property
    def extensions(self) -> dict[str, Any]:
        return {
            "entity": self.entity,
            "operation": self.operation,
            "upstream_status": self.status_code,
        }
