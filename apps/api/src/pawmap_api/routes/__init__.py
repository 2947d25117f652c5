"""API routes for PawMap geo."""

from pawmap_api.routes.locations import router as locations_router
from pawmap_api.routes.projection import router as projection_router

__all__ = [
    "locations_router",
    "projection_router",
]
