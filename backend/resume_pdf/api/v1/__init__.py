"""
API v1 router configuration for ResumeForge PDF
Health checks, template catalog and resume rendering
"""

from fastapi import APIRouter

from .health import router as health_router
from .resume import router as resume_router

# Create main API router
api_router = APIRouter()

# Include health check router
api_router.include_router(
    health_router,
    prefix="/health",
    tags=["health"]
)

# Include resume rendering router
api_router.include_router(
    resume_router,
    prefix="/resume",
    tags=["resume"]
)
