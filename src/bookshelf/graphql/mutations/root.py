"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook", description="add a new book")
    async def add_book(self, info: strawberry.Info, name: str, pages: int) -> Book:
        """Add a book; it gets the next id."""
        from ..resolvers.book import add_book

        return await add_book(info, name, pages)

    @strawberry.mutation(name="updateBook", description="Update existing book")
    async def update_book(
        self,
        info: strawberry.Info,
        id: int,
        name: str | None = strawberry.UNSET,
        pages: int | None = strawberry.UNSET,
    ) -> Book | None:
        """Update the given fields of a book. Returns null if no book has this id."""
        from ..resolvers.book import update_book

        return await update_book(info, id, name=name, pages=pages)
