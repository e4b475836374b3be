"""Tests for the book list widget."""

import pytest

from readinglist.api.schemas.books import DraftField, SortOrder
from readinglist.config import get_settings
from readinglist.core.books.book_list import (
    DEFAULT_HEADING,
    DEFAULT_PLACEHOLDER,
    BookList,
    create_book_list,
)
from readinglist.core.books.samples import DEMO_BOOKS, DEMO_HEADING


def test_render_defaults():
    view = BookList().render()
    assert view.heading == "Reading List"
    assert view.total == 0
    assert view.items == []
    assert view.status == "0 books in total"
    assert view.empty_message.startswith("No books to display")
    assert view.composer.is_open is False
    assert view.composer.toggle_label == "New Entry"


def test_render_lists_visible_cards(book_list):
    view = book_list.render()
    assert view.heading == "Test Shelf"
    assert [item.title for item in view.items] == ["Refactoring", "Test Driven Development"]
    assert all(item.description is None for item in view.items)
    assert all(item.image_src == DEFAULT_PLACEHOLDER for item in view.items)


def test_toggle_detail_reveals_description(book_list):
    """Only the toggled card exposes its description."""
    book_list.toggle_detail("test-id")
    view = book_list.render()
    cards = {item.id: item for item in view.items}
    assert cards["test-id"].description == "A book about writing tests before production code."
    assert cards["refactoring"].description is None


def test_unknown_ids_return_none(book_list):
    assert book_list.toggle_detail("missing") is None
    assert book_list.image_failed("missing") is None
    assert book_list.render_card("missing") is None


def test_quick_add_starts_collapsed(book_list):
    book = book_list.quick_add()
    card = book_list.render_card(book.id)
    assert card.title == "Untitled Book 3"
    assert card.detail_visible is False


def test_submit_through_widget(book_list):
    book_list.composer.toggle_open()
    book_list.composer.update_field(DraftField.TITLE, "Clean Code")
    book = book_list.submit()

    view = book_list.render()
    assert book is not None
    assert view.total == 3
    assert view.composer.is_open is False
    assert view.composer.draft.title == ""


def test_supply_replaces_records_and_card_states(book_list, base_books):
    """A changed external list resets records and every card state."""
    book_list.toggle_detail("test-id")
    book_list.image_failed("test-id")
    book_list.quick_add()

    assert book_list.supply(base_books) is True

    view = book_list.render()
    assert [item.id for item in view.items] == ["test-id"]
    assert view.items[0].detail_visible is False
    assert view.items[0].image_load_failed is False


def test_supply_same_list_keeps_state(book_list, extended_books):
    book_list.toggle_detail("refactoring")
    assert book_list.supply(list(extended_books)) is False
    assert book_list.render_card("refactoring").detail_visible is True


def test_card_state_survives_filtering(book_list):
    book_list.toggle_detail("refactoring")
    book_list.collection.set_search_term("driven")
    assert [item.id for item in book_list.render().items] == ["test-id"]

    book_list.collection.set_search_term("")
    assert book_list.render_card("refactoring").detail_visible is True


def test_render_reflects_query(book_list):
    book_list.collection.set_sort_order(SortOrder.DESC)
    book_list.collection.set_search_term("e")
    view = book_list.render()
    assert view.sort_order == SortOrder.DESC
    assert view.search_term == "e"
    assert [item.title for item in view.items] == ["Test Driven Development", "Refactoring"]
    assert view.status == "2 of 2 showing"


def test_create_book_list_seeds_demo_books(monkeypatch, fresh_settings):
    monkeypatch.delenv("LIST_HEADING", raising=False)
    book_list = create_book_list()
    assert book_list.heading == DEMO_HEADING
    assert book_list.collection.books == list(DEMO_BOOKS)


@pytest.fixture
def fresh_settings():
    """Re-read settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_create_book_list_uses_configured_heading(monkeypatch, fresh_settings):
    """LIST_HEADING replaces the demo heading."""
    monkeypatch.setenv("LIST_HEADING", "My Shelf")
    book_list = create_book_list()
    assert book_list.heading == "My Shelf"
    assert book_list.collection.books == list(DEMO_BOOKS)


def test_create_book_list_without_demo_books(monkeypatch, fresh_settings):
    monkeypatch.setenv("SEED_DEMO_BOOKS", "false")
    monkeypatch.delenv("LIST_HEADING", raising=False)
    book_list = create_book_list()
    assert book_list.heading == DEFAULT_HEADING
    assert len(book_list.collection) == 0
