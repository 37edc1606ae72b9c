"""Synchronous book lookup endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_query_service, resolve_ignore_case
from src.api.schemas.books import Book, BookMatch, MessageResponse
from src.core.catalog.query import QueryService

router = APIRouter(tags=["Books"])

NOT_FOUND = {404: {"model": MessageResponse}}


@router.get("/", response_model=dict[str, Book], response_model_exclude_none=True)
def list_books(
    service: Annotated[QueryService, Depends(get_query_service)],
) -> dict[str, Book]:
    """List the whole catalog keyed by ISBN."""
    return service.list_all()


@router.get(
    "/isbn/{isbn:path}",
    response_model=Book,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_book_by_isbn(
    isbn: str,
    service: Annotated[QueryService, Depends(get_query_service)],
) -> Book:
    """Get book details by ISBN."""
    return service.find_by_id(isbn)


@router.get(
    "/author/{author:path}",
    response_model=list[BookMatch],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_books_by_author(
    author: str,
    service: Annotated[QueryService, Depends(get_query_service)],
    ignore_case: Annotated[bool, Depends(resolve_ignore_case)],
) -> list[BookMatch]:
    """Get all books by an author."""
    return service.find_by_author(author, ignore_case=ignore_case)


@router.get(
    "/title/{title:path}",
    response_model=list[BookMatch],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_books_by_title(
    title: str,
    service: Annotated[QueryService, Depends(get_query_service)],
    ignore_case: Annotated[bool, Depends(resolve_ignore_case)],
) -> list[BookMatch]:
    """Get all books with a title."""
    return service.find_by_title(title, ignore_case=ignore_case)


@router.get("/review/{isbn:path}", response_model=dict[str, str], responses=NOT_FOUND)
def get_book_reviews(
    isbn: str,
    service: Annotated[QueryService, Depends(get_query_service)],
) -> dict[str, str]:
    """Get the reviews of a book. Books without reviews return ``{}``."""
    return service.get_reviews(isbn)
