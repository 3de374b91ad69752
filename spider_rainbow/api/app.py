"""FastAPI application factory for the Spider Rainbow service."""

from __future__ import annotations

import time
from datetime import datetime, timezone

import psutil
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import config
from ..core.logger import log
from .routes import zone_router


def process_uptime() -> float:
    """Seconds since the current process started."""
    started = psutil.Process().create_time()
    return max(0.0, time.time() - started)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=f"{config.service_name} API",
        description="Health monitoring and click zones for the Spider Rainbow page",
        version=config.service_version,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request, call_next):
        log.info(f"API Request: {request.method} {request.url}")
        response = await call_next(request)
        log.info(f"API Response: {response.status_code}")
        return response

    app.include_router(zone_router, prefix="/api/v1/zones", tags=["zones"])

    # Health check endpoint for container monitoring
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": process_uptime(),
        }

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "message": f"{config.service_name} API",
            "version": config.service_version,
            "docs": "/docs",
            "health": "/health"
        }

    log.info("FastAPI application created successfully")
    return app
