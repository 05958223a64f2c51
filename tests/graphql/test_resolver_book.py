"""
Tests for book GraphQL resolvers
"""

import pytest

from bookshelf.graphql.resolvers.book import (
    BookInputError,
    add_book,
    get_store_from_info,
    resolve_book,
    resolve_book_list,
    update_book,
)
from bookshelf.graphql.types.book import Book, BookGenre


class TestResolveBook:
    """Tests for resolve_book function."""

    @pytest.mark.asyncio
    async def test_returns_matching_book(self, make_info, sample_store):
        result = await resolve_book(make_info(sample_store), "Dune")

        assert isinstance(result, Book)
        assert result.id == 1
        assert result.pages == 412
        assert result.genre == BookGenre.FANTASY
        assert result.author.name == "Frank Herbert"
        assert result.reviews[0].rating == 5
        assert result.reviews[0].reviewer.name == "Ada"

    @pytest.mark.asyncio
    async def test_missing_book_returns_none(self, make_info, sample_store):
        assert await resolve_book(make_info(sample_store), "Missing") is None

    @pytest.mark.asyncio
    async def test_no_name_returns_none(self, make_info, sample_store):
        assert await resolve_book(make_info(sample_store)) is None

    @pytest.mark.asyncio
    async def test_match_is_case_sensitive(self, make_info, sample_store):
        assert await resolve_book(make_info(sample_store), "dune") is None


class TestResolveBookList:
    """Tests for resolve_book_list function."""

    @pytest.mark.asyncio
    async def test_without_filter_returns_everything(self, make_info, sample_store):
        result = await resolve_book_list(make_info(sample_store))

        assert [b.name for b in result] == ["Dune", "The Shining"]

    @pytest.mark.asyncio
    async def test_filter_returns_exact_matches(self, make_info, sample_store):
        info = make_info(sample_store)
        await add_book(info, "Dune", 100)

        result = await resolve_book_list(info, "Dune")

        assert [b.id for b in result] == [1, 6]
        assert await resolve_book_list(info, "Nothing") == []

    @pytest.mark.asyncio
    async def test_length_tracks_every_add(self, make_info, dune_store):
        info = make_info(dune_store)
        sizes = []
        for i in range(3):
            await add_book(info, f"Book {i}", i)
            sizes.append(len(await resolve_book_list(info)))

        assert sizes == [2, 3, 4]


class TestAddBook:
    """Tests for add_book mutation resolver."""

    @pytest.mark.asyncio
    async def test_assigns_next_id(self, make_info, dune_store):
        result = await add_book(make_info(dune_store), "Foo", 10)

        assert (result.id, result.name, result.pages) == (6, "Foo", 10)
        assert result.genre is None
        assert result.author is None
        assert result.reviews == []
        assert len(dune_store) == 2

    @pytest.mark.asyncio
    async def test_rejects_negative_pages(self, make_info, dune_store):
        with pytest.raises(BookInputError, match="pages"):
            await add_book(make_info(dune_store), "Foo", -1)

        assert len(dune_store) == 1
        assert dune_store.last_id == 5

    @pytest.mark.asyncio
    async def test_rejects_empty_name(self, make_info, dune_store):
        with pytest.raises(BookInputError, match="name"):
            await add_book(make_info(dune_store), "", 10)


class TestUpdateBook:
    """Tests for update_book mutation resolver."""

    @pytest.mark.asyncio
    async def test_updates_given_fields(self, make_info, dune_store):
        info = make_info(dune_store)
        await add_book(info, "Foo", 10)

        result = await update_book(info, 6, pages=20)

        assert (result.id, result.name, result.pages) == (6, "Foo", 20)

    @pytest.mark.asyncio
    async def test_null_arguments_are_ignored(self, make_info, dune_store):
        result = await update_book(make_info(dune_store), 1, name=None, pages=500)

        assert result.name == "Dune"
        assert result.pages == 500

    @pytest.mark.asyncio
    async def test_same_patch_twice_is_idempotent(self, make_info, dune_store):
        info = make_info(dune_store)

        first = await update_book(info, 1, name="Dune Messiah", pages=256)
        second = await update_book(info, 1, name="Dune Messiah", pages=256)

        assert first == second

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, make_info, dune_store):
        before = dune_store.list_all()

        assert await update_book(make_info(dune_store), 99, name="Ghost") is None
        assert dune_store.list_all() == before

    @pytest.mark.asyncio
    async def test_invalid_patch_is_rejected(self, make_info, dune_store):
        with pytest.raises(BookInputError):
            await update_book(make_info(dune_store), 1, pages=-5)

        assert dune_store.find_by_id(1).pages == 412


class TestGetStoreFromInfo:
    """Tests for get_store_from_info."""

    def test_missing_store_raises(self, make_info):
        with pytest.raises(RuntimeError, match="not available"):
            get_store_from_info(make_info(None))

    @pytest.mark.asyncio
    async def test_resolver_propagates_missing_store(self, make_info):
        with pytest.raises(RuntimeError):
            await resolve_book_list(make_info(None))
