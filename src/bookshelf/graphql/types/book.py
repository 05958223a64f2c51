"""
Book GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...store.models import BookRecord, Genre

BookGenre = strawberry.enum(Genre, name="BookGenre", description="Book genre enumeration.")


@strawberry.interface
class Entity:
    """Anything with a display name."""

    name: str


@strawberry.type
class Author:
    """Book author."""

    id: int
    name: str


@strawberry.type
class Reviewer:
    id: int
    name: str


@strawberry.type
class Review:
    """A single review of a book."""

    id: int
    review: str
    rating: int
    reviewer: Reviewer | None = None


@strawberry.type
class Book(Entity):
    """Book type for GraphQL API."""

    id: int
    name: str
    pages: int
    genre: BookGenre | None = None
    author: Author | None = None
    reviews: list[Review] = strawberry.field(default_factory=list)

    @classmethod
    def from_record(cls, record: BookRecord) -> Book:
        """Convert a stored record to its GraphQL type."""
        return cls(
            id=record.id,
            name=record.name,
            pages=record.pages,
            genre=record.genre,
            author=(
                Author(id=record.author.id, name=record.author.name) if record.author else None
            ),
            reviews=[
                Review(
                    id=review.id,
                    review=review.review,
                    rating=review.rating,
                    reviewer=(
                        Reviewer(id=review.reviewer.id, name=review.reviewer.name)
                        if review.reviewer
                        else None
                    ),
                )
                for review in record.reviews
            ],
        )
