"""HTTP client for the upstream REST services.

Every GraphQL field is answered by exactly one call made through
:class:`UpstreamClient`. Calls are JSON in and JSON out, the full URL is
URI-encoded before dispatch, and no retry or circuit breaking is applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

import httpx

from ..logging import get_logger, record_upstream_call
from .errors import UpstreamError

logger = get_logger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Characters left untouched by JavaScript's encodeURI, besides alphanumerics.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def encode_uri(url: str) -> str:
    """Percent-encode a full URL, keeping its reserved characters intact."""
    return quote(url, safe=_URI_SAFE)


def add_params(url: str, parameters: Mapping[str, Any] | None) -> str:
    """Append query parameters to a URL.

    Parameters are emitted in insertion order. Falsy values (``""``, ``0``,
    ``None``, ``False``, empty lists) are skipped, so a filter equal to zero
    cannot be expressed. List values repeat the key. The trailing ``?`` or
    ``&`` left by this construction is kept.
    """
    query_url = f"{url}?"
    for key, value in (parameters or {}).items():
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            query_url += f"{key}=" + f"&{key}=".join(str(v) for v in value) + "&"
        else:
            query_url += f"{key}={value}&"
    return query_url


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class UpstreamClient:
    """Issues JSON requests against the upstream services."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        show_urls: bool = False,
        errors_as_data: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.show_urls = show_urls
        self.errors_as_data = errors_as_data
        self._transport = transport

    async def request(
        self,
        url: str,
        method: HttpMethod,
        body: Any = None,
        *,
        entity: str | None = None,
        operation: str | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON response.

        Raises:
            UpstreamError: On transport failure or a non-2xx status. When the
                client was built with ``errors_as_data`` the error is returned
                instead of raised.
        """
        if self.show_urls:
            logger.info("Upstream request", method=method, url=url, entity=entity)

        encoded_url = encode_uri(url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self._transport
            ) as client:
                response = await client.request(method, encoded_url, json=body)
        except httpx.HTTPError as e:
            record_upstream_call(entity, failed=True)
            logger.warning(
                "Upstream request failed",
                method=method,
                url=encoded_url,
                entity=entity,
                operation=operation,
                error=str(e),
            )
            return self._fail(
                UpstreamError(
                    f"{entity or 'upstream'} {operation or method} failed: {e}",
                    entity=entity,
                    operation=operation,
                    url=encoded_url,
                )
            )

        record_upstream_call(entity, failed=not response.is_success)
        payload = _decode_body(response)
        if response.is_success:
            return payload

        logger.warning(
            "Upstream returned error status",
            method=method,
            url=encoded_url,
            entity=entity,
            operation=operation,
            status_code=response.status_code,
        )
        return self._fail(
            UpstreamError(
                f"{entity or 'upstream'} {operation or method} failed: "
                f"upstream returned {response.status_code}",
                entity=entity,
                operation=operation,
                url=encoded_url,
                status_code=response.status_code,
                payload=payload,
            )
        )

    async def get(
        self,
        url: str,
        path: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        entity: str | None = None,
        operation: str | None = None,
    ) -> Any:
        """GET ``<url>/<path>`` with the given query parameters."""
        query_url = add_params(f"{url}/{path}", parameters)
        return await self.request(query_url, "GET", entity=entity, operation=operation)

    def _fail(self, error: UpstreamError) -> UpstreamError:
        if self.errors_as_data:
            return error
        raise error
