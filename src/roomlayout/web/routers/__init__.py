"""API routers for the REST API."""

from roomlayout.web.routers.migrate import router as migrate_router
from roomlayout.web.routers.placement import router as placement_router
from roomlayout.web.routers.validate import router as validate_router

__all__ = [
    "migrate_router",
    "placement_router",
    "validate_router",
]
