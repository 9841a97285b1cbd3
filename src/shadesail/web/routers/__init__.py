"""API routers for the REST API."""

from shadesail.web.routers.calculate import router as calculate_router
from shadesail.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "validate_router",
]
