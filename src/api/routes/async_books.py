"""Book lookup endpoints that answer after an artificial delay.

Each route mirrors a synchronous route in ``books`` and returns the same
payload, only later.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_query_service, resolve_ignore_case
from src.api.schemas.books import Book, BookMatch, MessageResponse
from src.core.catalog.query import QueryService

router = APIRouter(tags=["Books (async)"])

ERRORS = {
    404: {"model": MessageResponse},
    500: {"model": MessageResponse},
}


@router.get(
    "/async-books",
    response_model=dict[str, Book],
    response_model_exclude_none=True,
    responses={500: {"model": MessageResponse}},
)
async def list_books_async(
    service: Annotated[QueryService, Depends(get_query_service)],
) -> dict[str, Book]:
    return await service.list_all_async()


@router.get(
    "/async-isbn/{isbn:path}",
    response_model=Book,
    response_model_exclude_none=True,
    responses=ERRORS,
)
async def get_book_by_isbn_async(
    isbn: str,
    service: Annotated[QueryService, Depends(get_query_service)],
) -> Book:
    return await service.find_by_id_async(isbn)


@router.get(
    "/async-author/{author:path}",
    response_model=list[BookMatch],
    response_model_exclude_none=True,
    responses=ERRORS,
)
async def get_books_by_author_async(
    author: str,
    service: Annotated[QueryService, Depends(get_query_service)],
    ignore_case: Annotated[bool, Depends(resolve_ignore_case)],
) -> list[BookMatch]:
    return await service.find_by_author_async(author, ignore_case=ignore_case)


@router.get(
    "/async-title/{title:path}",
    response_model=list[BookMatch],
    response_model_exclude_none=True,
    responses=ERRORS,
)
async def get_books_by_title_async(
    title: str,
    service: Annotated[QueryService, Depends(get_query_service)],
    ignore_case: Annotated[bool, Depends(resolve_ignore_case)],
) -> list[BookMatch]:
    return await service.find_by_title_async(title, ignore_case=ignore_case)


@router.get("/async-review/{isbn:path}", response_model=dict[str, str], responses=ERRORS)
async def get_book_reviews_async(
    isbn: str,
    service: Annotated[QueryService, Depends(get_query_service)],
) -> dict[str, str]:
    return await service.get_reviews_async(isbn)
