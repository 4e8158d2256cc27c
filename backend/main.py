#!/usr/bin/env python3
"""
ResumeForge PDF API
Renders structured resume data into print-ready A4 PDFs in four designs
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from resume_pdf.api.v1 import api_router
from resume_pdf.api.v1.health import health_check
from resume_pdf.api.v1.resume import limiter
from resume_pdf.core.config import settings, log_settings_summary
from resume_pdf.core.logging import configure_logging

configure_logging(settings.log_level, json_output=settings.is_production)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_settings_summary()
    logger.info("ResumeForge PDF API started", version=settings.app_version)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, debug=settings.debug, lifespan=lifespan)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Page-Count"],
)

app.include_router(api_router, prefix="/api/v1")
app.add_api_route("/health", health_check, methods=["GET"], tags=["health"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
