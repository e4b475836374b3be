"""Book list schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SortOrder(str, Enum):
    """Title ordering of the visible list."""
    ASC = "asc"
    DESC = "desc"


class DraftField(str, Enum):
    """Editable fields of the entry composer."""
    TITLE = "title"
    DESCRIPTION = "description"
    IMAGE_URL = "image_url"


class Book(BaseModel):
    """A single book entry."""
    id: str = Field(min_length=1, description="Unique book identifier")
    title: str = Field(description="Book title")
    description: Optional[str] = Field(default=None, description="Short description")
    image_url: Optional[str] = Field(default=None, description="Cover image URL")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value


class Draft(BaseModel):
    """Uncommitted composer fields, kept verbatim as typed."""
    title: str = ""
    description: str = ""
    image_url: str = ""


class BookCardView(BaseModel):
    """Rendered card for one visible book."""
    id: str
    title: str
    image_src: str = Field(description="Cover image or the fallback placeholder")
    image_alt: str
    toggle_label: str
    detail_visible: bool
    image_load_failed: bool
    description: Optional[str] = Field(
        default=None,
        description="Only present while the card is expanded",
    )


class ComposerView(BaseModel):
    """Rendered state of the entry composer."""
    is_open: bool
    toggle_label: str
    draft: Draft
    error: Optional[str] = None


class BookListView(BaseModel):
    """Everything the presentation layer needs to draw the list."""
    heading: str
    search_term: str
    sort_order: SortOrder
    total: int
    visible_count: int
    status: str = Field(description="Human readable result count")
    empty_message: Optional[str] = None
    items: list[BookCardView] = Field(default_factory=list)
    composer: ComposerView


class ReplaceBooksRequest(BaseModel):
    """Externally supplied list that replaces the current one when it differs."""
    books: list[Book]


class QueryUpdateRequest(BaseModel):
    """Search and sort changes; omitted fields are left untouched."""
    search_term: Optional[str] = Field(default=None, description="Free text search")
    sort_order: Optional[SortOrder] = None


class DraftUpdateRequest(BaseModel):
    """Single composer field edit."""
    field: DraftField
    value: str = ""
