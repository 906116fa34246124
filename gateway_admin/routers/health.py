"""
Health check endpoints for the API.
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any
from datetime import datetime

from gateway_admin.config import settings
from gateway_admin.dependencies import get_selector_service
from gateway_admin.domain.ports import SelectorServicePort

router = APIRouter()

@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns API status and version information.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT
    }

@router.get("/health/store")
def store_health(
    service: SelectorServicePort = Depends(get_selector_service)
) -> Dict[str, Any]:
    """
    Check that the selector store answers.
    """
    try:
        service.ping()
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "store": settings.SELECTOR_STORE,
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "timestamp": datetime.now().isoformat(),
            "store": settings.SELECTOR_STORE,
            "error": str(e)
        }
