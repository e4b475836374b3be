"""Authoritative book collection and its derived view."""

import unicodedata
from collections.abc import Iterable
from functools import lru_cache

import structlog
from pyuca import Collator

from readinglist.api.schemas.books import Book, SortOrder
from readinglist.core.books.ids import new_book_id

logger = structlog.get_logger(__name__)

QUICK_ADD_DESCRIPTION = "This is a placeholder entry. Replace it with a real recommendation."


@lru_cache
def get_collator() -> Collator:
    """Get the shared Unicode collator (loading its table is slow)."""
    return Collator()


def title_sort_key(title: str) -> tuple[int, ...]:
    """
    Unicode collation key comparing titles by base letter.

    Case and accents are folded away before collating, so "Dune", "dune" and
    "Düne" share a key while letters such as "Ø" and leading punctuation
    still sort where the Unicode collation table puts them.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return get_collator().sort_key(base.casefold())


def normalize_term(term: str) -> str:
    return term.strip().lower()


def matches(book: Book, normalized_term: str) -> bool:
    """Whether ``book`` matches an already normalized search term."""
    if not normalized_term:
        return True
    return (
        normalized_term in book.title.lower()
        or normalized_term in (book.description or "").lower()
    )


class BookCollection:
    """Owns the book records plus the search term and sort order applied to them."""

    def __init__(
        self,
        books: Iterable[Book] = (),
        quick_add_description: str = QUICK_ADD_DESCRIPTION,
    ) -> None:
        self._books: list[Book] = []
        self._source: list[Book] | None = None
        self.search_term = ""
        self.sort_order = SortOrder.ASC
        self.quick_add_description = quick_add_description
        self.replace(books)

    @property
    def books(self) -> list[Book]:
        """Records in insertion order."""
        return list(self._books)

    @property
    def ids(self) -> set[str]:
        return {book.id for book in self._books}

    def __len__(self) -> int:
        return len(self._books)

    def get(self, book_id: str) -> Book | None:
        """Get a book by ID."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def replace(self, books: Iterable[Book]) -> bool:
        """
        Replace every record with an externally supplied list.

        The swap only happens when the supplied contents differ from the
        previously supplied list; records added locally since then are
        dropped. Returns True if the records were replaced.
        """
        incoming = list(books)
        seen: set[str] = set()
        for book in incoming:
            if book.id in seen:
                raise ValueError(f"Duplicate book id: {book.id}")
            seen.add(book.id)

        if incoming == self._source:
            return False

        self._source = incoming
        self._books = list(incoming)
        logger.info("Book list replaced", count=len(incoming))
        return True

    def append(self, book: Book) -> Book:
        """Append a record; ids must stay unique."""
        if book.id in self.ids:
            raise ValueError(f"Duplicate book id: {book.id}")
        self._books.append(book)
        return book

    def quick_add(self) -> Book:
        """Append a placeholder book numbered after the current count."""
        book = Book(
            id=new_book_id(self.ids),
            title=f"Untitled Book {len(self._books) + 1}",
            description=self.quick_add_description,
        )
        self._books.append(book)
        logger.info("Quick-added book", book_id=book.id, title=book.title)
        return book

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def set_sort_order(self, order: SortOrder) -> None:
        self.sort_order = SortOrder(order)

    def compute_visible(self) -> list[Book]:
        """
        Sorted, filtered projection of the records.

        All records are ordered by title first, then filtered. Books whose
        titles collate equal keep their insertion order in either direction.
        """
        term = normalize_term(self.search_term)
        ordered = sorted(
            self._books,
            key=lambda book: title_sort_key(book.title),
            reverse=self.sort_order is SortOrder.DESC,
        )
        return [book for book in ordered if matches(book, term)]

    def status_text(self, visible_count: int | None = None) -> str:
        """Result count line, e.g. ``3 books in total`` or ``1 of 3 showing``."""
        if visible_count is None:
            visible_count = len(self.compute_visible())
        total = len(self._books)
        if visible_count == total and not self.search_term:
            noun = "book" if total == 1 else "books"
            return f"{total} {noun} in total"
        return f"{visible_count} of {total} showing"

    def empty_message(self, visible_count: int | None = None) -> str | None:
        """Placeholder text shown instead of the list, or None if anything is visible."""
        if visible_count is None:
            visible_count = len(self.compute_visible())
        if visible_count:
            return None
        if not self._books:
            return "No books to display. Use the Add Book button to create your first entry."
        return "No books fit this search. Try adjusting your filters."
