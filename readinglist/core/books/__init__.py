"""Book list module."""

from readinglist.core.books.book_list import BookList, get_book_list
from readinglist.core.books.collection import BookCollection
from readinglist.core.books.composer import EntryComposer
from readinglist.core.books.presentation import CardState, CardStates

__all__ = [
    "BookList",
    "get_book_list",
    "BookCollection",
    "EntryComposer",
    "CardState",
    "CardStates",
]
