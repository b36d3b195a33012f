"""
Bookstore API - Author Route Handlers
======================================

What:  CRUD endpoints under /api/authors, same contract as /api/books.

    GET    /api/authors        → 200 list
    GET    /api/authors/{id}   → 200 item | 404
    POST   /api/authors        → 201 item | 400          (admin)
    PUT    /api/authors/{id}   → 204 | 400 | 404         (admin)
    DELETE /api/authors/{id}   → 204 | 400 | 404         (admin)

Deleting an author does not touch books that reference it.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response

from bookstore.config import settings
from bookstore.routes.deps import get_author_service, route_location
from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.schemas.common import ValidationErrorResponse
from bookstore.security import get_current_user, require_role
from bookstore.services.author_service import AuthorService

router = APIRouter(
    prefix="/api/authors",
    tags=["Authors"],
    dependencies=[Depends(get_current_user)],
)

_admin_only = [Depends(require_role(settings.admin_role))]

_SERVER_ERROR = {500: {"description": "Server error (generic text body)"}}
_NOT_FOUND = {404: {"description": "Author not found (no body)"}}
_BAD_REQUEST = {400: {"description": "Invalid request", "model": ValidationErrorResponse}}


@router.get(
    "",
    response_model=List[AuthorResponse],
    responses=_SERVER_ERROR,
    summary="List all authors",
)
async def list_authors(
    location: str = Depends(route_location),
    service: AuthorService = Depends(get_author_service),
) -> List[AuthorResponse]:
    return await service.list(location)


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get an author by ID",
)
async def get_author(
    author_id: int,
    location: str = Depends(route_location),
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    return await service.get(location, author_id)


@router.post(
    "",
    status_code=201,
    response_model=AuthorResponse,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
    summary="Create an author",
)
async def create_author(
    response: Response,
    payload: Optional[AuthorCreate] = Body(default=None),
    location: str = Depends(route_location),
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    created = await service.create(location, payload)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put(
    "/{author_id}",
    status_code=204,
    response_class=Response,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace an author",
)
async def update_author(
    author_id: int,
    payload: Optional[AuthorUpdate] = Body(default=None),
    location: str = Depends(route_location),
    service: AuthorService = Depends(get_author_service),
) -> Response:
    await service.update(location, author_id, payload)
    return Response(status_code=204)


@router.delete(
    "/{author_id}",
    status_code=204,
    response_class=Response,
    dependencies=_admin_only,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete an author",
)
async def delete_author(
    author_id: int,
    location: str = Depends(route_location),
    service: AuthorService = Depends(get_author_service),
) -> Response:
    await service.delete(location, author_id)
    return Response(status_code=204)
