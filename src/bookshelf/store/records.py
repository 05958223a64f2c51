"""
In-memory record store for books
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .models import BookCreate, BookPatch, BookRecord

logger = get_logger(__name__)


class BookStore:
    """
    Ordered, mutable collection of books plus the id counter that numbers them.

    One lock guards both the record list and the counter, so id assignment and
    the read-modify-write in ``update`` never interleave. Every read returns
    copies; stored records only change through ``append``, ``update`` and
    ``load``.
    """

    def __init__(self, initial_max_id: int = 0):
        self._books: list[BookRecord] = []
        self._last_id = initial_max_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    @property
    def last_id(self) -> int:
        """The most recently assigned (or seeded) id."""
        with self._lock:
            return self._last_id

    def list_all(self) -> list[BookRecord]:
        """Return every book in insertion order."""
        with self._lock:
            return [book.model_copy(deep=True) for book in self._books]

    def find_by_id(self, book_id: int) -> BookRecord | None:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            return self._books[index].model_copy(deep=True)

    def find_by_name(self, name: str) -> BookRecord | None:
        """Return the first book whose name matches exactly, if any."""
        with self._lock:
            for book in self._books:
                if book.name == name:
                    return book.model_copy(deep=True)
            return None

    def filter_by_name(self, name: str) -> list[BookRecord]:
        """Return every book whose name matches exactly, in insertion order."""
        with self._lock:
            return [book.model_copy(deep=True) for book in self._books if book.name == name]

    def append(self, draft: BookCreate) -> BookRecord:
        """
        Add a new book at the end of the store.

        Args:
            draft: Validated name and page count

        Returns:
            The stored book, carrying its newly assigned id
        """
        with self._lock:
            self._last_id += 1
            book = BookRecord(id=self._last_id, name=draft.name, pages=draft.pages)
            self._books.append(book)
            logger.info("Book added", book_id=book.id, name=book.name)
            return book.model_copy(deep=True)

    def update(self, book_id: int, patch: BookPatch) -> BookRecord | None:
        """
        Overwrite the fields present in ``patch`` on the book with ``book_id``.

        Returns:
            The updated book, or None when no book has that id (nothing changes)
        """
        changes = patch.changes()
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None

            book = self._books[index].model_copy(update=changes)
            self._books[index] = book
            logger.info("Book updated", book_id=book_id, updated_fields=sorted(changes))
            return book.model_copy(deep=True)

    def load(self, records: Iterable[BookRecord]) -> int:
        """
        Bulk insert seed records, keeping their ids.

        The counter moves up to the largest loaded id so later appends never
        reuse one. Records whose id is already taken are skipped.

        Returns:
            Number of records loaded
        """
        loaded = 0
        with self._lock:
            taken = {book.id for book in self._books}
            for record in records:
                if record.id in taken:
                    logger.warning("Skipping seed book with duplicate id", book_id=record.id)
                    continue
                self._books.append(record.model_copy(deep=True))
                taken.add(record.id)
                self._last_id = max(self._last_id, record.id)
                loaded += 1
        return loaded

    def _index_of(self, book_id: int) -> int | None:
        # Caller must hold the lock
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
