"""Book identifier generation."""

import uuid
from collections.abc import Container


def new_book_id(taken: Container[str] = ()) -> str:
    """Return a random UUID4 string not present in ``taken``."""
    while True:
        book_id = str(uuid.uuid4())
        if book_id not in taken:
            return book_id
