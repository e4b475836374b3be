"""Book list API endpoints.

Each endpoint is one user-facing trigger of the widget. Handlers are ``async``
without awaiting anything, so they run to completion on the event loop one at
a time.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from readinglist.api.schemas.books import (
    BookCardView,
    BookListView,
    DraftUpdateRequest,
    QueryUpdateRequest,
    ReplaceBooksRequest,
)
from readinglist.core.books.book_list import BookList, get_book_list

router = APIRouter(prefix="/v1/books", tags=["Books"])

BookListDep = Annotated[BookList, Depends(get_book_list)]


# --- List & Query ---


@router.get("", response_model=BookListView)
async def get_view(book_list: BookListDep) -> BookListView:
    """Render the current list, status line and composer."""
    return book_list.render()


@router.put("", response_model=BookListView)
async def replace_books(request: ReplaceBooksRequest, book_list: BookListDep) -> BookListView:
    """
    Supply the external book list.

    Different contents replace every record and reset all card states;
    re-sending the same list changes nothing.
    """
    try:
        book_list.supply(request.books)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return book_list.render()


@router.put("/query", response_model=BookListView)
async def update_query(request: QueryUpdateRequest, book_list: BookListDep) -> BookListView:
    """Change the search term and/or sort order."""
    if request.search_term is not None:
        book_list.collection.set_search_term(request.search_term)
    if request.sort_order is not None:
        book_list.collection.set_sort_order(request.sort_order)
    return book_list.render()


@router.post("/quick-add", response_model=BookListView, status_code=201)
async def quick_add(book_list: BookListDep) -> BookListView:
    """Append an "Untitled Book N" placeholder."""
    book_list.quick_add()
    return book_list.render()


# --- Composer ---


@router.post("/composer/toggle", response_model=BookListView)
async def toggle_composer(book_list: BookListDep) -> BookListView:
    """Open or close the entry form."""
    book_list.composer.toggle_open()
    return book_list.render()


@router.patch("/composer/draft", response_model=BookListView)
async def update_draft(request: DraftUpdateRequest, book_list: BookListDep) -> BookListView:
    """Edit one draft field."""
    book_list.composer.update_field(request.field, request.value)
    return book_list.render()


@router.post("/composer/submit", response_model=BookListView)
async def submit_composer(book_list: BookListDep) -> BookListView:
    """
    Submit the draft.

    A blank title is reported in ``composer.error`` rather than as an HTTP
    error so the form can be corrected and resubmitted. Submitting while the
    form is closed is a conflict.
    """
    if not book_list.composer.is_open:
        raise HTTPException(status_code=409, detail="Entry form is closed")
    book_list.submit()
    return book_list.render()


@router.post("/composer/cancel", response_model=BookListView)
async def cancel_composer(book_list: BookListDep) -> BookListView:
    """Close the entry form without adding anything."""
    book_list.composer.cancel()
    return book_list.render()


# --- Cards ---


@router.get("/{book_id}", response_model=BookCardView)
async def get_card(book_id: str, book_list: BookListDep) -> BookCardView:
    """Render a single book card."""
    card = book_list.render_card(book_id)
    if card is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return card


@router.post("/{book_id}/detail", response_model=BookCardView)
async def toggle_detail(book_id: str, book_list: BookListDep) -> BookCardView:
    """Show or hide a book's description."""
    if book_list.toggle_detail(book_id) is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_list.render_card(book_id)


@router.post("/{book_id}/image-error", response_model=BookCardView)
async def report_image_error(book_id: str, book_list: BookListDep) -> BookCardView:
    """Switch a card to the placeholder image after its cover failed to load."""
    if book_list.image_failed(book_id) is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_list.render_card(book_id)
