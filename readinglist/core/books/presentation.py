"""Per-card transient display state."""

from dataclasses import dataclass
from typing import Optional

from readinglist.api.schemas.books import Book, BookCardView

PLACEHOLDER_ALT = "Placeholder book cover art"
MISSING_DESCRIPTION = "Description unavailable."


@dataclass
class CardState:
    """Expand/collapse and image fallback flags for one book."""
    detail_visible: bool = False
    image_load_failed: bool = False

    def toggle_detail(self) -> bool:
        self.detail_visible = not self.detail_visible
        return self.detail_visible

    def on_image_error(self) -> None:
        # No recovery: a later successful load does not clear the flag.
        self.image_load_failed = True


def render_card(book: Book, state: CardState, placeholder_image: str) -> BookCardView:
    """Derive the display fields of a card from its book and flags."""
    use_fallback = state.image_load_failed or not book.image_url
    if state.detail_visible:
        toggle_label = f"Hide description for {book.title}"
        description: Optional[str] = book.description or MISSING_DESCRIPTION
    else:
        toggle_label = f"Show description for {book.title}"
        description = None

    return BookCardView(
        id=book.id,
        title=book.title,
        image_src=placeholder_image if use_fallback else book.image_url,
        image_alt=PLACEHOLDER_ALT if use_fallback else f"{book.title} cover art",
        toggle_label=toggle_label,
        detail_visible=state.detail_visible,
        image_load_failed=state.image_load_failed,
        description=description,
    )


class CardStates:
    """Lazily created card states keyed by book id."""

    def __init__(self) -> None:
        self._states: dict[str, CardState] = {}

    def __contains__(self, book_id: str) -> bool:
        return book_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def get(self, book_id: str) -> CardState:
        """Get the state for a book, creating a collapsed one on first use."""
        state = self._states.get(book_id)
        if state is None:
            state = self._states[book_id] = CardState()
        return state

    def clear(self) -> None:
        self._states.clear()
