"""
Main API router
"""
from fastapi import APIRouter

from groupware_batch.api.v1 import health, batches

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(batches.router, prefix="/batches", tags=["batches"])
