"""
In-memory book store
"""

from .models import (
    AuthorRecord,
    BookCreate,
    BookPatch,
    BookRecord,
    Genre,
    ReviewerRecord,
    ReviewRecord,
)
from .records import BookStore
from .seed import build_store, load_seed_file

__all__ = [
    "AuthorRecord",
    "BookCreate",
    "BookPatch",
    "BookRecord",
    "BookStore",
    "Genre",
    "ReviewRecord",
    "ReviewerRecord",
    "build_store",
    "load_seed_file",
]
