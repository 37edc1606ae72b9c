"""Tests for the catalog query service."""

import asyncio
import time

import pytest

from src.core.catalog.query import QueryService
from src.core.errors import InternalError, NotFoundError


@pytest.fixture
def service(example_store):
    return QueryService(example_store, async_delay=0)


def test_find_by_id_returns_stored_record(service, example_store):
    for book_id in example_store:
        assert service.find_by_id(book_id) == example_store.get(book_id)


def test_find_by_id_missing(service):
    with pytest.raises(NotFoundError) as exc_info:
        service.find_by_id("9")
    assert exc_info.value.status_code == 404


def test_list_all_size(service, example_store):
    books = service.list_all()
    assert len(books) == len(example_store)
    assert set(books) == {"1", "2"}


def test_find_by_author_pairs_id(service):
    matches = service.find_by_author("X")
    assert [(m.id, m.title) for m in matches] == [("1", "A")]


def test_find_by_author_case_sensitive_by_default(service):
    with pytest.raises(NotFoundError):
        service.find_by_author("x")
    assert len(service.find_by_author("x", ignore_case=True)) == 1


def test_find_by_title_missing(service):
    with pytest.raises(NotFoundError, match="No books found with this title"):
        service.find_by_title("C")


def test_get_reviews(service):
    assert service.get_reviews("1") == {}
    assert service.get_reviews("2") == {"bob": "great"}
    with pytest.raises(NotFoundError):
        service.get_reviews("9")


def test_async_variants_match_sync(service):
    async def run():
        return (
            await service.list_all_async(),
            await service.find_by_id_async("2"),
            await service.find_by_author_async("Y"),
            await service.find_by_title_async("A"),
            await service.get_reviews_async("2"),
        )

    assert asyncio.run(run()) == (
        service.list_all(),
        service.find_by_id("2"),
        service.find_by_author("Y"),
        service.find_by_title("A"),
        service.get_reviews("2"),
    )


def test_async_not_found_propagates(service):
    with pytest.raises(NotFoundError):
        asyncio.run(service.find_by_id_async("9"))


def test_async_waits_for_delay(example_store):
    service = QueryService(example_store, async_delay=0.05)
    start = time.perf_counter()
    asyncio.run(service.find_by_id_async("1"))
    assert time.perf_counter() - start >= 0.04


def test_async_wraps_unexpected_errors(example_store, monkeypatch):
    service = QueryService(example_store, async_delay=0)

    def explode(book_id):
        raise KeyError(book_id)

    monkeypatch.setattr(example_store, "get", explode)
    with pytest.raises(InternalError, match="Error fetching books"):
        asyncio.run(service.find_by_id_async("1"))


def test_find_by_title_ignore_case(service):
    with pytest.raises(NotFoundError):
        service.find_by_title("b")
    assert [m.id for m in service.find_by_title("b", ignore_case=True)] == ["2"]
