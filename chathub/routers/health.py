"""Health check endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter
import logging

from ..core.config import settings
from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/", operation_id="healthcheck")
async def health_check():
    """Basic health check"""
    return {
        "status": "ok",
        "service": "ChatHub API",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

@router.get("/db-health")
async def database_health():
    """Database connectivity check"""
    db_healthy = await health_check_db()
    if not db_healthy:
        logger.error("Database health check reported unhealthy")
    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "database": "connected" if db_healthy else "unreachable"
    }
