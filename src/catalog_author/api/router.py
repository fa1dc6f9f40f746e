"""catalog_author REST endpoints.

GET    /authors                 — all authors
GET    /authors/{author_id}     — single author
GET    /authors/{author_id}/books — author with its books
POST   /authors                 — create
PUT    /authors/{author_id}     — full replace
DELETE /authors/{author_id}     — delete (cascades to books)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_author.application.schemas import (
    AuthorOut,
    AuthorRequest,
    AuthorWithBooksOut,
)
from src.catalog_author.application.service import AuthorCacheService
from src.catalog_common.cache import CacheGatewayProtocol
from src.catalog_common.database import get_db_session
from src.catalog_common.dependencies import get_cache_gateway
from src.catalog_common.response import ApiResponse, success_response

router = APIRouter(prefix="/authors", tags=["authors"])


def get_author_service(
    cache: Annotated[CacheGatewayProtocol, Depends(get_cache_gateway)],
) -> AuthorCacheService:
    return AuthorCacheService(cache)


Service = Annotated[AuthorCacheService, Depends(get_author_service)]
Session = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("")
async def list_authors(request: Request, service: Service, db: Session) -> ApiResponse:
    authors = (await service.get_all(db)).unwrap()
    resp = success_response([AuthorOut.from_domain(a).model_dump() for a in authors])
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{author_id}")
async def get_author(
    author_id: int, request: Request, service: Service, db: Session
) -> ApiResponse:
    author = (await service.get(db, author_id)).unwrap()
    resp = success_response(AuthorOut.from_domain(author).model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{author_id}/books")
async def get_author_books(
    author_id: int, request: Request, service: Service, db: Session
) -> ApiResponse:
    author = (await service.get_related(db, author_id)).unwrap()
    resp = success_response(AuthorWithBooksOut.from_joined(author).model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("", status_code=201)
async def create_author(
    body: AuthorRequest, request: Request, service: Service, db: Session
) -> ApiResponse:
    author = (await service.create(db, body.to_draft())).unwrap()
    resp = success_response(
        AuthorOut.from_domain(author).model_dump(), "Author created successfully"
    )
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.put("/{author_id}")
async def update_author(
    author_id: int,
    body: AuthorRequest,
    request: Request,
    service: Service,
    db: Session,
) -> ApiResponse:
    author = (await service.update(db, author_id, body.to_draft())).unwrap()
    resp = success_response(
        AuthorOut.from_domain(author).model_dump(), "Author updated successfully"
    )
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.delete("/{author_id}")
async def delete_author(
    author_id: int, request: Request, service: Service, db: Session
) -> ApiResponse:
    (await service.delete(db, author_id)).unwrap()
    resp = success_response(None, "Author deleted successfully")
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
