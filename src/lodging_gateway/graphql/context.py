"""
Per-request GraphQL context
"""

import re
from typing import Any

_BEARER_TOKEN = re.compile(r"Bearer ([A-Za-z0-9]+)")


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization: Bearer <token>`` header value.

    The token is carried in the context for future use; nothing validates it.
    """
    if not authorization:
        return None
    match = _BEARER_TOKEN.search(authorization)
    if match and match.group(1):
        return match.group(1)
    return None


def build_context(authorization: str | None, gateway: Any) -> dict[str, Any]:
    return {
        "token": extract_bearer_token(authorization),
        "gateway": gateway,
    }
