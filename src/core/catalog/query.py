"""Lookup operations over the book catalog."""

import asyncio
from typing import Callable, TypeVar

import structlog

from src.api.schemas.books import Book, BookMatch
from src.core.catalog.store import CatalogStore
from src.core.errors import CatalogError, InternalError, NotFoundError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

BOOK_NOT_FOUND = "Book not found"
NO_AUTHOR_MATCH = "No books found by this author"
NO_TITLE_MATCH = "No books found with this title"
ASYNC_FAILURE = "Error fetching books"


class QueryService:
    """Synchronous and delayed-asynchronous lookups against a catalog store."""

    def __init__(self, store: CatalogStore, async_delay: float = 0.1) -> None:
        self._store = store
        self._async_delay = async_delay

    # --- Synchronous lookups ---

    def list_all(self) -> dict[str, Book]:
        """Return every book keyed by ISBN."""
        return self._store.all()

    def find_by_id(self, book_id: str) -> Book:
        """Get a single book by ISBN."""
        book = self._store.get(book_id)
        if book is None:
            logger.debug("Book lookup missed", isbn=book_id)
            raise NotFoundError(BOOK_NOT_FOUND)
        return book

    def find_by_author(self, author: str, ignore_case: bool = False) -> list[BookMatch]:
        """Get every book whose author equals ``author``."""
        matches = self._match("author", author, ignore_case)
        if not matches:
            logger.debug("Author lookup missed", author=author, ignore_case=ignore_case)
            raise NotFoundError(NO_AUTHOR_MATCH)
        return matches

    def find_by_title(self, title: str, ignore_case: bool = False) -> list[BookMatch]:
        """Get every book whose title equals ``title``."""
        matches = self._match("title", title, ignore_case)
        if not matches:
            logger.debug("Title lookup missed", title=title, ignore_case=ignore_case)
            raise NotFoundError(NO_TITLE_MATCH)
        return matches

    def get_reviews(self, book_id: str) -> dict[str, str]:
        """Get the reviews of a book. An empty mapping is a valid result."""
        return dict(self.find_by_id(book_id).reviews)

    def _match(self, field: str, value: str, ignore_case: bool) -> list[BookMatch]:
        if ignore_case:
            wanted = value.casefold()
            predicate = lambda book: getattr(book, field).casefold() == wanted  # noqa: E731
        else:
            predicate = lambda book: getattr(book, field) == value  # noqa: E731

        return [
            BookMatch(id=book_id, **book.model_dump())
            for book_id, book in self._store.all().items()
            if predicate(book)
        ]

    # --- Asynchronous lookups ---

    async def list_all_async(self) -> dict[str, Book]:
        return await self._deferred(self.list_all)

    async def find_by_id_async(self, book_id: str) -> Book:
        return await self._deferred(self.find_by_id, book_id)

    async def find_by_author_async(self, author: str, ignore_case: bool = False) -> list[BookMatch]:
        return await self._deferred(self.find_by_author, author, ignore_case)

    async def find_by_title_async(self, title: str, ignore_case: bool = False) -> list[BookMatch]:
        return await self._deferred(self.find_by_title, title, ignore_case)

    async def get_reviews_async(self, book_id: str) -> dict[str, str]:
        return await self._deferred(self.get_reviews, book_id)

    async def _deferred(self, lookup: Callable[..., T], *args) -> T:
        """
        Run a lookup after the artificial delay.

        Catalog errors pass through unchanged; anything else becomes an
        ``InternalError``.
        """
        await asyncio.sleep(self._async_delay)
        try:
            return lookup(*args)
        except CatalogError:
            raise
        except Exception as e:
            logger.exception("Deferred lookup failed", lookup=lookup.__name__)
            raise InternalError(ASYNC_FAILURE) from e
