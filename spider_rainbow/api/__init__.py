"""FastAPI endpoints for the Spider Rainbow service.

This sub-package provides:
- Health monitoring for container probes
- Click-zone resolution for the page's clickable images
"""

from .app import create_app
from .routes import zone_router

__all__ = [
    "create_app",
    "zone_router",
]
