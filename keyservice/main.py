"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from keyservice.api.routes import keys, scopes, verify
from keyservice.core.config import settings
from keyservice.core.exceptions import InvalidCredentialError, KeyServiceError
from keyservice.core.key_manager import KeyManager
from keyservice.core.key_store import InMemoryKeyStore
from keyservice.core.logging_config import configure_logging
from keyservice.core.metrics import render_metrics
from keyservice.dashboard import DASHBOARD_HTML
from keyservice.middleware.cors import CORSHeadersMiddleware
from keyservice.middleware.request_context import RequestContextMiddleware
from keyservice.models.keys import HealthResponse

configure_logging(settings.log_level, settings.resolved_log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build a fresh in-memory store for this process and seed it if asked to."""
    manager = KeyManager(InMemoryKeyStore())
    if settings.seed_demo_keys:
        manager.seed()
    app.state.key_manager = manager
    logger.info(
        "%s %s started (environment: %s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )
    yield
    logger.info("%s shutting down; %d key(s) discarded", settings.app_name, len(manager.list_keys()))


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Create, list, rotate, revoke and verify API keys",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Added last runs first: OPTIONS is answered before request bookkeeping
app.add_middleware(RequestContextMiddleware)
app.add_middleware(CORSHeadersMiddleware, headers=settings.cors_headers)


@app.exception_handler(KeyServiceError)
async def key_service_error_handler(request: Request, exc: KeyServiceError) -> JSONResponse:
    """Map service exceptions to the JSON error payloads the API promises."""
    request_id = getattr(request.state, "request_id", "")
    logger.warning(
        "%s on %s %s: %s",
        exc.error_code,
        request.method,
        request.url.path,
        exc.message,
        extra={"request_id": request_id, "details": exc.details},
    )
    if isinstance(exc, InvalidCredentialError):
        return JSONResponse(status_code=exc.status_code, content={"valid": False})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Include API routers
app.include_router(keys.router)
app.include_router(scopes.router)
app.include_router(verify.router)


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        HealthResponse with status information
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@app.get("/api/metrics", tags=["health"], include_in_schema=False)
async def metrics() -> Response:
    """Prometheus exposition of request and key metrics."""
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)


@app.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def dashboard(path: str) -> HTMLResponse:
    """Every other GET path serves the dashboard."""
    return HTMLResponse(DASHBOARD_HTML)


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "keyservice.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
