"""
Record models for the in-memory book store
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..logging import get_logger

logger = get_logger(__name__)


class Genre(Enum):
    """Book genre. Values are the lowercase words used in seed files."""

    HORROR = "horror"
    FANTASY = "fantasy"
    DRAMA = "drama"
    MYSTERY = "mystery"


GENRE_VALUES = {genre.value for genre in Genre}


class AuthorRecord(BaseModel):
    id: int
    name: str


class ReviewerRecord(BaseModel):
    id: int
    name: str


class ReviewRecord(BaseModel):
    id: int
    review: str
    rating: int
    reviewer: ReviewerRecord | None = None


class BookRecord(BaseModel):
    """A stored book.

    Seed files written for the original data format key the id as ``bookId``;
    both spellings are accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(validation_alias=AliasChoices("id", "bookId"))
    name: str
    pages: int
    genre: Genre | None = None
    author: AuthorRecord | None = None
    reviews: list[ReviewRecord] = Field(default_factory=list)

    @field_validator("genre", mode="before")
    @classmethod
    def normalize_genre(cls, value: Any) -> Genre | None:
        """Map seed genre strings onto Genre; unknown genres become None."""
        if value is None or isinstance(value, Genre):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                return None
            if normalized in GENRE_VALUES:
                return Genre(normalized)
        logger.warning("Unknown book genre, leaving it unset", genre=value)
        return None


class BookCreate(BaseModel):
    """Validated arguments for adding a book."""

    name: str = Field(min_length=1)
    pages: int = Field(ge=0)


class BookPatch(BaseModel):
    """Validated arguments for updating a book. Unset fields are left alone."""

    name: str | None = Field(default=None, min_length=1)
    pages: int | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, Any]:
        """Fields present in this patch."""
        return self.model_dump(exclude_none=True)
