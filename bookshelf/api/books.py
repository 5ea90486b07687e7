"""Book API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookshelf.database import get_db
from bookshelf.schemas.book import (
    BookCreate,
    BookDelete,
    BookResponse,
    BookUpdate,
    MessageResponse,
)
from bookshelf.services import books
from bookshelf.services.ownership import (
    Ownership,
    check_ownership,
    coerce_owner_id,
    is_supplied,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def _internal_error(db: Session, message: str, error: Exception) -> HTTPException:
    """Roll back, log the underlying failure and build a generic 500."""
    db.rollback()
    logger.exception(f"{message}: {error}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _enforce_ownership(db: Session, book_id: int, claimed_owner_id, action: str) -> None:
    """Raise 404/403 unless the caller may mutate the book."""
    ownership = check_ownership(db, book_id, claimed_owner_id)
    if ownership is Ownership.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    if ownership is Ownership.DENIED:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action} this book",
        )


@router.post("", response_model=BookResponse)
async def create_book(
    book_data: BookCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new book."""
    try:
        book = books.create_book(
            db,
            title=book_data.title,
            author=book_data.author,
            year=book_data.year,
            owner_id=coerce_owner_id(book_data.owner_id),
        )
    except (SQLAlchemyError, ValueError) as e:
        raise _internal_error(db, "Error creating book", e) from e

    return BookResponse.model_validate(book)


@router.get("", response_model=list[BookResponse])
async def get_books(
    db: Annotated[Session, Depends(get_db)],
    owner_id: Annotated[str | None, Query(alias="ownerId")] = None,
):
    """Get all books, optionally filtered by owner."""
    filter_owner_id = None
    if is_supplied(owner_id):
        try:
            filter_owner_id = coerce_owner_id(owner_id)
        except ValueError:
            # A non-integral owner id can't match any stored owner
            return []

    try:
        result = books.list_books(db, owner_id=filter_owner_id)
    except SQLAlchemyError as e:
        raise _internal_error(db, "Error fetching books", e) from e

    return [BookResponse.model_validate(book) for book in result]


@router.put("/{book_id}", response_model=MessageResponse)
async def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a book.

    The ownership check only runs when the caller supplies an owner id. The
    update itself does not verify the book exists.
    """
    try:
        _enforce_ownership(db, book_id, book_data.owner_id, "update")
        books.update_book(
            db,
            book_id,
            title=book_data.title,
            author=book_data.author,
            year=book_data.year,
        )
    except SQLAlchemyError as e:
        raise _internal_error(db, "Error updating book", e) from e

    return MessageResponse(message="Book updated")


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(
    book_id: int,
    db: Annotated[Session, Depends(get_db)],
    delete_data: Annotated[BookDelete | None, Body()] = None,
):
    """Delete a book. Unlike update, an owner id is mandatory."""
    claimed_owner_id = delete_data.owner_id if delete_data is not None else None
    if not is_supplied(claimed_owner_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ownerId is required to delete a book",
        )

    try:
        _enforce_ownership(db, book_id, claimed_owner_id, "delete")
        books.delete_book(db, book_id)
    except SQLAlchemyError as e:
        raise _internal_error(db, "Error deleting book", e) from e

    return MessageResponse(message="Book deleted")
