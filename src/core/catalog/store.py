"""Read-only in-memory book catalog."""

import json
from pathlib import Path
from typing import Iterator, Mapping, Optional

import structlog
from pydantic import ValidationError

from src.api.schemas.books import Book
from src.core.catalog.data import BOOKS
from src.core.errors import CatalogLoadError

logger = structlog.get_logger(__name__)


class CatalogStore:
    """Immutable mapping of ISBN to book record.

    Built once at startup and handed to whatever needs to read it. There are
    no mutation operations.
    """

    def __init__(self, books: Mapping[str, Book]) -> None:
        self._books: dict[str, Book] = dict(books)

    def get(self, book_id: str) -> Optional[Book]:
        """Get a book by ISBN."""
        return self._books.get(book_id)

    def all(self) -> dict[str, Book]:
        """Return the full catalog in insertion order."""
        return dict(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def __iter__(self) -> Iterator[str]:
        return iter(self._books)

    @classmethod
    def from_records(cls, records: Mapping[str, dict]) -> "CatalogStore":
        """Validate raw ``{isbn: {...}}`` records into a store."""
        books: dict[str, Book] = {}
        for book_id, record in records.items():
            try:
                books[str(book_id)] = Book.model_validate(record)
            except ValidationError as e:
                raise CatalogLoadError(f"Invalid catalog record '{book_id}': {e}") from e
        return cls(books)


def load_catalog(path: Optional[Path] = None) -> CatalogStore:
    """
    Build the catalog store.

    Args:
        path: JSON file holding an object of ISBN to book record. The bundled
            seed catalog is used when omitted.

    Returns:
        A populated catalog store
    """
    if path is None:
        store = CatalogStore.from_records(BOOKS)
        logger.info("Catalog loaded", source="seed", books=len(store))
        return store

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogLoadError(f"Catalog file {path} must contain a JSON object")

    store = CatalogStore.from_records(raw)
    logger.info("Catalog loaded", source=str(path), books=len(store))
    return store
