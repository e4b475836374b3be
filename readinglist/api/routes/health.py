"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from readinglist.core.books.book_list import BookList, get_book_list

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(book_list: Annotated[BookList, Depends(get_book_list)]) -> dict:
    """Readiness check - verifies the book list is loaded."""
    return {
        "status": "ready",
        "heading": book_list.heading,
        "books": len(book_list.collection),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
