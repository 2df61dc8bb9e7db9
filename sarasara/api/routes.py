from fastapi import APIRouter
from .endpoints import feed_routes, audio_routes
from .common import logger

# Create main router
router = APIRouter()

# Include all sub-routers
router.include_router(feed_routes.router, tags=["feeds"])
router.include_router(audio_routes.router, tags=["audio"])

logger.info("API routes initialized")
