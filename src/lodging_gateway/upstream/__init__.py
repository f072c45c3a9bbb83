"""Upstream REST service access."""

from .client import UpstreamClient, add_params, encode_uri
from .errors import UpstreamError

__all__ = ["UpstreamClient", "UpstreamError", "add_params", "encode_uri"]
