"""API routes."""

from readinglist.api.routes.health import router as health_router
from readinglist.api.routes.books import router as books_router

__all__ = ["health_router", "books_router"]
