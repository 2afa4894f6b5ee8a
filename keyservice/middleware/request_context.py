"""Middleware to propagate X-Request-ID and record one access line per request."""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from keyservice.core.metrics import record_http_request

logger = logging.getLogger(__name__)

# Module-level ContextVar so code deeper in the call stack can read the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _endpoint_label(request: Request) -> str:
    """Route template (``/api/keys/{key_id}``) rather than the raw path, to bound label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Reads or generates an X-Request-ID for every request, sets it on
    request.state.request_id and echoes it back in the response header.
    Logs method, route, status and duration once the response is ready.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = req_id
        token = request_id_var.set(req_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            duration = time.perf_counter() - started
            endpoint = _endpoint_label(request)
            record_http_request(request.method, endpoint, response.status_code, duration)
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                duration * 1000,
                extra={"request_id": req_id, "endpoint": endpoint},
            )
            response.headers["X-Request-ID"] = req_id
            return response
        finally:
            request_id_var.reset(token)
