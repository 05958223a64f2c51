"""
Bookshelf
GraphQL API over an in-memory collection of books
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
