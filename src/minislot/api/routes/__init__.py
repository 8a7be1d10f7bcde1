"""API route modules for minislot."""

from .deployment import router as deployment_router
from .health import router as health_router
from .reference_data import router as reference_data_router

__all__ = [
    "health_router",
    "deployment_router",
    "reference_data_router",
]
