"""
Health check endpoints for ResumeForge PDF
Simple status monitoring without authentication
"""

from typing import Dict, Any
from fastapi import APIRouter

from resume_pdf.core.config import settings
from resume_pdf.models.resume import DesignVariant

router = APIRouter()


@router.get("/")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint
    Returns application status and version
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment
    }


@router.get("/detailed")
async def detailed_health_check() -> Dict[str, Any]:
    """
    Detailed health check with rendering configuration
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "rendering": {
            "designs": [variant.value for variant in DesignVariant],
            "default_design": settings.default_design,
            "text_measurement": settings.text_measurement,
            "fonts": settings.get_font_config()
        },
        "configuration": {
            "rate_limit_per_minute": settings.rate_limit_per_minute,
            "debug": settings.debug
        }
    }
