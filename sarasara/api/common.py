from fastapi import HTTPException, Request
import httpx

from ..core.config import Settings
from ..core.logging_config import get_logger

logger = get_logger(__name__)

def handle_api_exception(e, operation_name, status_code=500, log_full_error=True):
    """Common exception handler for API routes"""
    if isinstance(e, HTTPException):
        raise e
    logger.error(f"Error {operation_name}: {str(e)}", exc_info=log_full_error)
    raise HTTPException(status_code=status_code, detail=f"Failed to {operation_name}: {str(e)}")

def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared HTTP client created by the application lifespan"""
    return request.app.state.http_client

def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with"""
    return request.app.state.settings
