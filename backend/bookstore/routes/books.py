"""
Bookstore API - Book Route Handlers
====================================

What:  CRUD endpoints under /api/books.
How:   Every endpoint requires a valid Bearer token; writes additionally
       require the admin role. Handlers only translate HTTP into
       BookService calls. Error statuses come from the exception handlers
       registered in main.py.

    GET    /api/books        → 200 list
    GET    /api/books/{id}   → 200 item | 404
    POST   /api/books        → 201 item | 400
    PUT    /api/books/{id}   → 204 | 400 | 404
    DELETE /api/books/{id}   → 204 | 400 | 404
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response

from bookstore.config import settings
from bookstore.routes.deps import get_book_service, route_location
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate
from bookstore.schemas.common import ValidationErrorResponse
from bookstore.security import get_current_user, require_role
from bookstore.services.book_service import BookService

router = APIRouter(
    prefix="/api/books",
    tags=["Books"],
    dependencies=[Depends(get_current_user)],
)

_admin_only = [Depends(require_role(settings.admin_role))]

_SERVER_ERROR = {500: {"description": "Server error (generic text body)"}}
_NOT_FOUND = {404: {"description": "Book not found (no body)"}}
_BAD_REQUEST = {400: {"description": "Invalid request", "model": ValidationErrorResponse}}


@router.get(
    "",
    response_model=List[BookResponse],
    responses=_SERVER_ERROR,
    summary="List all books",
)
async def list_books(
    location: str = Depends(route_location),
    service: BookService = Depends(get_book_service),
) -> List[BookResponse]:
    return await service.list(location)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a book by ID",
)
async def get_book(
    book_id: int,
    location: str = Depends(route_location),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return await service.get(location, book_id)


@router.post(
    "",
    status_code=201,
    response_model=BookResponse,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
    summary="Create a book",
)
async def create_book(
    response: Response,
    payload: Optional[BookCreate] = Body(default=None),
    location: str = Depends(route_location),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    created = await service.create(location, payload)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace a book",
)
async def update_book(
    book_id: int,
    payload: Optional[BookUpdate] = Body(default=None),
    location: str = Depends(route_location),
    service: BookService = Depends(get_book_service),
) -> Response:
    await service.update(location, book_id, payload)
    return Response(status_code=204)


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a book",
)
async def delete_book(
    book_id: int,
    location: str = Depends(route_location),
    service: BookService = Depends(get_book_service),
) -> Response:
    await service.delete(location, book_id)
    return Response(status_code=204)
