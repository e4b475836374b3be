"""The book list widget: collection, composer and card states in one place."""

from collections.abc import Iterable
from typing import Optional

import structlog

from readinglist.api.schemas.books import Book, BookCardView, BookListView, ComposerView
from readinglist.config import get_settings
from readinglist.core.books.collection import QUICK_ADD_DESCRIPTION, BookCollection
from readinglist.core.books.composer import EntryComposer
from readinglist.core.books.presentation import CardState, CardStates, render_card
from readinglist.core.books.samples import DEMO_BOOKS, DEMO_HEADING

logger = structlog.get_logger(__name__)

DEFAULT_HEADING = "Reading List"
DEFAULT_PLACEHOLDER = "https://placehold.co/96x96?text=Book"


class BookList:
    """
    In-memory state machine behind an interactive reading list.

    Every mutation goes through one of the trigger methods below and runs to
    completion. :meth:`render` never touches the records; it only creates
    missing card states.
    """

    def __init__(
        self,
        books: Iterable[Book] = (),
        heading: str = DEFAULT_HEADING,
        placeholder_image: Optional[str] = None,
        quick_add_description: str = QUICK_ADD_DESCRIPTION,
    ) -> None:
        self.heading = heading
        self.placeholder_image = placeholder_image or DEFAULT_PLACEHOLDER
        self.collection = BookCollection(books, quick_add_description=quick_add_description)
        self.composer = EntryComposer(self.collection)
        self.cards = CardStates()

    def supply(self, books: Iterable[Book]) -> bool:
        """Accept a new external list; changed contents reset records and card states."""
        replaced = self.collection.replace(books)
        if replaced:
            self.cards.clear()
        return replaced

    def quick_add(self) -> Book:
        book = self.collection.quick_add()
        self.cards.get(book.id)
        return book

    def submit(self) -> Optional[Book]:
        book = self.composer.submit()
        if book is not None:
            self.cards.get(book.id)
        return book

    def card_state(self, book_id: str) -> Optional[CardState]:
        """Card state of a book in the collection, or None for unknown ids."""
        if self.collection.get(book_id) is None:
            return None
        return self.cards.get(book_id)

    def toggle_detail(self, book_id: str) -> Optional[CardState]:
        state = self.card_state(book_id)
        if state is not None:
            state.toggle_detail()
            logger.debug("Toggled book detail", book_id=book_id, visible=state.detail_visible)
        return state

    def image_failed(self, book_id: str) -> Optional[CardState]:
        state = self.card_state(book_id)
        if state is not None and not state.image_load_failed:
            state.on_image_error()
            logger.debug("Cover image failed, using placeholder", book_id=book_id)
        return state

    def render_card(self, book_id: str) -> Optional[BookCardView]:
        book = self.collection.get(book_id)
        if book is None:
            return None
        return render_card(book, self.cards.get(book_id), self.placeholder_image)

    def render(self) -> BookListView:
        """Build the full view model for the presentation layer."""
        visible = self.collection.compute_visible()
        return BookListView(
            heading=self.heading,
            search_term=self.collection.search_term,
            sort_order=self.collection.sort_order,
            total=len(self.collection),
            visible_count=len(visible),
            status=self.collection.status_text(len(visible)),
            empty_message=self.collection.empty_message(len(visible)),
            items=[
                render_card(book, self.cards.get(book.id), self.placeholder_image)
                for book in visible
            ],
            composer=ComposerView(
                is_open=self.composer.is_open,
                toggle_label=self.composer.toggle_label,
                draft=self.composer.draft.model_copy(),
                error=self.composer.validation_error,
            ),
        )


# Singleton instance
_book_list: BookList | None = None


def create_book_list() -> BookList:
    """Build a widget from the application settings."""
    settings = get_settings()
    if settings.seed_demo_books:
        books: Iterable[Book] = DEMO_BOOKS
        heading = DEMO_HEADING
    else:
        books = ()
        heading = DEFAULT_HEADING
    return BookList(
        books,
        heading=settings.list_heading or heading,
        placeholder_image=settings.placeholder_image,
        quick_add_description=settings.quick_add_description,
    )


def get_book_list() -> BookList:
    """Get or create the book list singleton."""
    global _book_list
    if _book_list is None:
        _book_list = create_book_list()
    return _book_list
