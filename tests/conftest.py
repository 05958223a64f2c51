"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.store import BookRecord, BookStore

SAMPLE_BOOKS: list[dict[str, Any]] = [
    {
        "bookId": 1,
        "name": "Dune",
        "pages": 412,
        "genre": "fantasy",
        "author": {"id": 1, "name": "Frank Herbert"},
        "reviews": [
            {
                "id": 1,
                "review": "A desert epic.",
                "rating": 5,
                "reviewer": {"id": 1, "name": "Ada"},
            }
        ],
    },
    {"bookId": 2, "name": "The Shining", "pages": 447, "genre": "horror"},
]


@pytest.fixture
def dune_store() -> BookStore:
    """Store seeded with a single book, id counter floor at 5."""
    store = BookStore(initial_max_id=5)
    store.load([BookRecord(id=1, name="Dune", pages=412)])
    return store


@pytest.fixture
def sample_store() -> BookStore:
    """Store seeded with SAMPLE_BOOKS, id counter floor at 5."""
    store = BookStore(initial_max_id=5)
    store.load(BookRecord.model_validate(item) for item in SAMPLE_BOOKS)
    return store


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Write SAMPLE_BOOKS to a JSON seed file."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(SAMPLE_BOOKS), encoding="utf-8")
    return path


@pytest.fixture
def make_info():
    """Build a mock GraphQL info object whose context carries a store."""

    def _make(store: BookStore | None) -> MagicMock:
        info = MagicMock(spec=strawberry.Info)
        info.context = {"request": MagicMock(), "store": store}
        return info

    return _make


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
