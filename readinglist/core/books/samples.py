"""Demo books used to seed the service."""

from readinglist.api.schemas.books import Book

DEMO_HEADING = "Team Picks Reading List"

DEMO_BOOKS: tuple[Book, ...] = (
    Book(
        id="atomic-habits",
        title="Atomic Habits",
        description=(
            "An actionable guide to building better habits and breaking bad ones "
            "using tiny behavior changes."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1529480786901-98cda847b5e0"
            "?auto=format&fit=crop&w=200&q=80"
        ),
    ),
    Book(
        id="design-of-everyday-things",
        title="The Design of Everyday Things",
        description=(
            "A classic exploration into human-centered design that still informs "
            "modern product thinking."
        ),
        image_url="",
    ),
    Book(
        id="refactoring-ui",
        title="Refactoring UI",
        image_url=(
            "https://images.unsplash.com/photo-1487412720507-e7ab37603c6f"
            "?auto=format&fit=crop&w=200&q=80"
        ),
    ),
)
