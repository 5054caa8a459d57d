"""
Health check endpoint
"""
from fastapi import APIRouter
from groupware_batch.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "groupware-batch",
        "version": settings.VERSION or "1.0.0",
    }
