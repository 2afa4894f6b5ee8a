"""Permissive cross-origin headers for the API.

Starlette's CORSMiddleware only answers preflights and echoes headers when the
browser sends an Origin. This service instead attaches one fixed header set to
every response except the HTML dashboard and answers every OPTIONS request
itself, whatever the path.
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Adds ``headers`` to non-HTML responses and short-circuits OPTIONS."""

    def __init__(self, app, headers: Dict[str, str]):
        super().__init__(app)
        self._headers = dict(headers)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self._headers)

        response = await call_next(request)
        if not response.headers.get("content-type", "").startswith("text/html"):
            response.headers.update(self._headers)
        return response
