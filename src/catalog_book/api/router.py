"""catalog_book REST endpoints.

GET    /books             — all books
GET    /books/{book_id}   — single book
POST   /books             — create (author_id must exist)
PUT    /books/{book_id}   — full replace, may move the book to another author
DELETE /books/{book_id}   — delete
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_book.application.schemas import BookOut, BookRequest
from src.catalog_book.application.service import BookCacheService
from src.catalog_common.cache import CacheGatewayProtocol
from src.catalog_common.database import get_db_session
from src.catalog_common.dependencies import get_cache_gateway
from src.catalog_common.response import ApiResponse, success_response

router = APIRouter(prefix="/books", tags=["books"])


def get_book_service(
    cache: Annotated[CacheGatewayProtocol, Depends(get_cache_gateway)],
) -> BookCacheService:
    return BookCacheService(cache)


Service = Annotated[BookCacheService, Depends(get_book_service)]
Session = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("")
async def list_books(request: Request, service: Service, db: Session) -> ApiResponse:
    books = (await service.get_all(db)).unwrap()
    resp = success_response([BookOut.from_domain(b).model_dump() for b in books])
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{book_id}")
async def get_book(
    book_id: int, request: Request, service: Service, db: Session
) -> ApiResponse:
    book = (await service.get(db, book_id)).unwrap()
    resp = success_response(BookOut.from_domain(book).model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("", status_code=201)
async def create_book(
    body: BookRequest, request: Request, service: Service, db: Session
) -> ApiResponse:
    book = (await service.create(db, body.to_draft())).unwrap()
    resp = success_response(BookOut.from_domain(book).model_dump(), "Book created successfully")
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.put("/{book_id}")
async def update_book(
    book_id: int,
    body: BookRequest,
    request: Request,
    service: Service,
    db: Session,
) -> ApiResponse:
    book = (await service.update(db, book_id, body.to_draft())).unwrap()
    resp = success_response(BookOut.from_domain(book).model_dump(), "Book updated successfully")
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.delete("/{book_id}")
async def delete_book(
    book_id: int, request: Request, service: Service, db: Session
) -> ApiResponse:
    (await service.delete(db, book_id)).unwrap()
    resp = success_response(None, "Book deleted successfully")
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
