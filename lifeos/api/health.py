"""Health check endpoints"""

from fastapi import APIRouter
from lifeos.utils.datetime_helper import get_utc_timestamp

router = APIRouter(tags=["health"])


@router.get("/health")
@router.get("/api/health")
async def health_check():
    """Liveness probe with a timestamp for diagnostics"""
    return {
        "ok": True,
        "status": "ok",
        "timestamp": get_utc_timestamp(),
    }
