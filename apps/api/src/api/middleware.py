"""Middleware setup for the FastAPI application."""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("api.access")

# Response headers that carry API data and must be readable by browser clients
EXPOSED_HEADERS = ("Location", "X-Pagination", "Allow", "X-Request-ID")

_DEV_ENVIRONMENTS = {"development", "dev", "local"}
_DEV_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173", "http://localhost:3000", "http://127.0.0.1:3000")


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins.

    The UI URL is allowed under both http and https; local dev servers are
    added outside production.

    Returns:
        Deduplicated list of allowed origin URLs
    """
    allowed_origins: list[str] = []

    if ui_url:
        origin = ui_url.rstrip("/")
        scheme, sep, rest = origin.partition("://")
        allowed_origins.append(origin)
        if sep and scheme in ("http", "https"):
            allowed_origins.append(f"{'https' if scheme == 'http' else 'http'}://{rest}")

    if environment.lower() in _DEV_ENVIRONMENTS:
        allowed_origins.extend(_DEV_ORIGINS)

    return list(dict.fromkeys(allowed_origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for responses built outside the CORS middleware.

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Expose-Headers": ", ".join(EXPOSED_HEADERS),
    }


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log one access line per request and tag the response with a request id."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
    started = time.perf_counter()

    response = await call_next(request)

    duration_ms = (time.perf_counter() - started) * 1000
    response.headers["X-Request-ID"] = request_id
    access_logger.info(
        "[%s] %s %s %s %.2fms",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI application for CORS
        environment: Environment name (development, production, etc.)
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=list(EXPOSED_HEADERS),
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
