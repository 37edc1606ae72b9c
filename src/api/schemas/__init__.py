"""API schemas."""

from src.api.schemas.books import Book, BookMatch, MessageResponse

__all__ = ["Book", "BookMatch", "MessageResponse"]
