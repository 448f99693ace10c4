"""API route modules."""

from routes.health_routes import router as health_router
from routes.hotels_routes import router as hotels_router

__all__ = [
    "health_router",
    "hotels_router",
]
