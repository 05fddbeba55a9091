"""ASGI middleware for the FastAPI application.

This module provides:
- Request ids and response timing headers
"""

from .request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware",
]
