"""Request context middleware.

Tags every HTTP response with a request id and its processing time, and logs
one line per request at debug level. Pure ASGI so streaming bodies pass
through untouched.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)


class RequestContextMiddleware:
    """
    Add tracing headers to all responses.

    Headers added:
        - X-Request-Id: Unique request identifier (reuses an incoming one)
        - X-Response-Time-Ms: Time until the response started
        - X-Content-Type-Options: nosniff
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers") or []).get(b"x-request-id")
        request_id = incoming.decode("latin-1") if incoming else str(uuid4())
        started = time.perf_counter()

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                elapsed_ms = (time.perf_counter() - started) * 1000
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode("latin-1")))
                headers.append((b"x-response-time-ms", f"{elapsed_ms:.1f}".encode()))
                headers.append((b"x-content-type-options", b"nosniff"))
                message = {**message, "headers": headers}
                logger.debug(
                    f"{scope.get('method')} {scope.get('path')} -> {message.get('status')} "
                    f"in {elapsed_ms:.1f}ms [{request_id}]"
                )
            await send(message)

        await self.app(scope, receive, send_with_headers)
