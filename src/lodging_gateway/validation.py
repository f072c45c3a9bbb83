"""
Configuration validation for the lodging gateway.

Upstream service URLs must be present and well formed before the
application serves any traffic.
"""

from __future__ import annotations

import httpx

from .config import Settings
from .logging import get_logger

logger = get_logger(__name__)


class ConfigurationError(Exception):
    """Raised when application configuration is incomplete or invalid."""

    pass


def validate_service_urls(settings: Settings) -> dict[str, str]:
    """
    Check that every upstream service has a usable base URL.

    Returns the entity name -> base URL mapping.
    Raises ConfigurationError listing every missing or malformed URL.
    """
    urls: dict[str, str] = {}
    errors: list[str] = []

    for entity, url in settings.service_urls().items():
        env_name = f"GATEWAY_{entity.upper()}_URL"
        if not url:
            errors.append(f"{env_name} is not set")
            continue
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            errors.append(f"{env_name} is not a valid URL: {e}")
            continue
        if parsed.scheme not in ("http", "https") or not parsed.host:
            errors.append(f"{env_name} must be an absolute http(s) URL, got {url!r}")
            continue
        urls[entity] = url

    if errors:
        logger.error("Service URL validation failed", errors=errors)
        raise ConfigurationError("; ".join(errors))

    logger.info("Service URL validation successful", services=sorted(urls))
    return urls
