from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry
from pydantic import ValidationError

from ...logging import get_logger
from ...store.models import BookCreate, BookPatch
from ...store.records import BookStore

if TYPE_CHECKING:
    from ..types.book import Book

logger = get_logger(__name__)


class BookInputError(ValueError):
    """Raised when mutation arguments fail validation."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> BookInputError:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
        )
        return cls(f"Invalid book input: {details}")


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Get the book store from the GraphQL execution context."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("Book store is not available in the request context")
    return store


def _present(value: Any) -> bool:
    return value is not strawberry.UNSET and value is not None


# Query resolvers
async def resolve_book(info: strawberry.Info, name: str | None = None) -> Book | None:
    """
    Resolve the first book whose name equals ``name`` (case-sensitive).

    Returns None when no name is given or nothing matches.
    """
    if name is None:
        return None

    record = get_store_from_info(info).find_by_name(name)
    if record is None:
        logger.info("Book not found", name=name)
        return None

    from ..types.book import Book as BookType

    return BookType.from_record(record)


async def resolve_book_list(info: strawberry.Info, name: str | None = None) -> list[Book]:
    """
    Resolve all books, or only those whose name equals ``name``.
    """
    store = get_store_from_info(info)
    records = store.list_all() if name is None else store.filter_by_name(name)

    from ..types.book import Book as BookType

    return [BookType.from_record(record) for record in records]


# Mutation resolvers
async def add_book(info: strawberry.Info, name: str, pages: int) -> Book:
    """
    Add a new book with the next id.
    """
    try:
        draft = BookCreate(name=name, pages=pages)
    except ValidationError as e:
        logger.info("Rejected addBook input", error=str(e))
        raise BookInputError.from_validation_error(e) from e

    record = get_store_from_info(info).append(draft)

    from ..types.book import Book as BookType

    return BookType.from_record(record)


async def update_book(
    info: strawberry.Info,
    id: int,
    name: str | None = strawberry.UNSET,
    pages: int | None = strawberry.UNSET,
) -> Book | None:
    """
    Update an existing book.

    Only arguments that were given (and not null) are applied. Returns None,
    leaving the store untouched, when no book has ``id``.
    """
    fields = {k: v for k, v in {"name": name, "pages": pages}.items() if _present(v)}
    try:
        patch = BookPatch(**fields)
    except ValidationError as e:
        logger.info("Rejected updateBook input", book_id=id, error=str(e))
        raise BookInputError.from_validation_error(e) from e

    record = get_store_from_info(info).update(id, patch)
    if record is None:
        logger.info("Book not found for update", book_id=id)
        return None

    from ..types.book import Book as BookType

    return BookType.from_record(record)
