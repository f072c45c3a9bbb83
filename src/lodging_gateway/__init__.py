"""
Lodging Gateway
GraphQL gateway stitching the lodging platform REST services into one schema
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
