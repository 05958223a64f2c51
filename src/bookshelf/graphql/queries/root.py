"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get single book")
    async def book(self, info: strawberry.Info, name: str | None = None) -> Book | None:
        """Get the first book with exactly this name."""
        from ..resolvers.book import resolve_book

        return await resolve_book(info, name)

    @strawberry.field(name="bookList", description="List of books")
    async def book_list(self, info: strawberry.Info, name: str | None = None) -> list[Book]:
        """Get all books, or only those with exactly this name."""
        from ..resolvers.book import resolve_book_list

        return await resolve_book_list(info, name)
