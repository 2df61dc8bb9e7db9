"""Main FastAPI application module for the sarasara feed server."""
import time
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request

from .routes import router
from ..core.config import Settings, get_settings
from ..core.logging_config import get_logger

logger = get_logger(__name__)

def create_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create the outbound client shared by all requests."""
    timeout = httpx.Timeout(settings.REQUEST_TIMEOUT)
    return httpx.AsyncClient(timeout=timeout, follow_redirects=False, transport=transport)

def create_app(settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to use, defaults to get_settings()
        transport: Optional httpx transport for the outbound client

    Returns:
        The application
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the shared HTTP client on startup and close it on shutdown."""
        app.state.http_client = create_http_client(settings, transport)
        logger.info(f"Serving feeds for {settings.RAIPLAYSOUND_URL}")
        if settings.PUBLIC_URL:
            logger.info(f"Proxying enclosures through {settings.PUBLIC_URL}")
        else:
            logger.info("PUBLIC_URL not set, enclosures point at upstream audio")
        try:
            yield
        finally:
            logger.info("Application is shutting down. Closing HTTP client.")
            await app.state.http_client.aclose()

    app = FastAPI(title="sarasara", lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def timing_middleware(request: Request, call_next):
        """Middleware to measure and log endpoint execution time."""
        start_time = time.time()
        response = await call_next(request)
        elapsed_time = time.time() - start_time
        logger.info(f"Endpoint '{request.url.path}' ({request.method}) returned {response.status_code} in {elapsed_time:.3f} seconds")
        return response

    app.include_router(router)
    return app
