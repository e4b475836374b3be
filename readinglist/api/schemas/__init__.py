"""API schemas."""

from readinglist.api.schemas.books import (
    Book,
    BookCardView,
    BookListView,
    ComposerView,
    Draft,
    DraftField,
    SortOrder,
)

__all__ = [
    "Book",
    "BookCardView",
    "BookListView",
    "ComposerView",
    "Draft",
    "DraftField",
    "SortOrder",
]
