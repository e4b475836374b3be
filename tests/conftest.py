"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from readinglist.api.schemas.books import Book
from readinglist.core.books.book_list import BookList, get_book_list
from readinglist.main import app


@pytest.fixture
def base_books():
    """A single book with a description."""
    return [
        Book(
            id="test-id",
            title="Test Driven Development",
            description="A book about writing tests before production code.",
        ),
    ]


@pytest.fixture
def extended_books(base_books):
    """Two books, unsorted by title."""
    return base_books + [
        Book(
            id="refactoring",
            title="Refactoring",
            description="Improve existing code in safe, incremental steps.",
        ),
    ]


@pytest.fixture
def book_list(extended_books):
    """A fresh widget holding the extended books."""
    return BookList(extended_books, heading="Test Shelf")


@pytest.fixture
def client(book_list):
    """Create a test client whose endpoints share the ``book_list`` fixture."""
    app.dependency_overrides[get_book_list] = lambda: book_list
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
