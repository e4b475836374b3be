"""Entry form for adding a custom book."""

from typing import Optional

import structlog

from readinglist.api.schemas.books import Book, Draft, DraftField
from readinglist.core.books.collection import BookCollection
from readinglist.core.books.ids import new_book_id

logger = structlog.get_logger(__name__)

TITLE_REQUIRED = "A title is required to add a book."


class EntryComposer:
    """
    Draft fields plus validation for the "New Entry" form.

    A successful submit appends to the target collection, clears the draft
    and closes the form. A failed submit only records an inline error.
    """

    def __init__(self, collection: BookCollection) -> None:
        self._collection = collection
        self.draft = Draft()
        self.is_open = False
        self.validation_error: Optional[str] = None

    @property
    def toggle_label(self) -> str:
        return "Close Form" if self.is_open else "New Entry"

    def toggle_open(self) -> bool:
        """Open or close the form without touching the draft."""
        self.is_open = not self.is_open
        return self.is_open

    def cancel(self) -> None:
        """Hide the form; the draft is kept for the next time it opens."""
        self.is_open = False

    def update_field(self, field: DraftField, value: str) -> None:
        """Store a field exactly as typed."""
        setattr(self.draft, DraftField(field).value, value)

    def submit(self) -> Optional[Book]:
        """
        Validate the draft and append it as a new book.

        Returns the created book, or None when the title is blank.
        """
        title = self.draft.title.strip()
        if not title:
            self.validation_error = TITLE_REQUIRED
            logger.info("Rejected book entry", reason="blank title")
            return None

        book = Book(
            id=new_book_id(self._collection.ids),
            title=title,
            description=self.draft.description.strip() or None,
            image_url=self.draft.image_url.strip() or None,
        )
        self._collection.append(book)

        self.validation_error = None
        self.draft = Draft()
        self.is_open = False
        logger.info("Added book from composer", book_id=book.id, title=book.title)
        return book
