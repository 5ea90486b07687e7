"""Book persistence: one statement per call, no business rules."""

from sqlalchemy.orm import Session

from bookshelf.models.book import Book


def create_book(
    db: Session,
    title: str | None,
    author: str | None,
    year: int | None,
    owner_id: int | None = None,
) -> Book:
    """Insert a book and return it with its generated id."""
    book = Book(title=title, author=author, year=year, owner_id=owner_id)
    db.add(book)
    db.commit()
    db.refresh(book)
    return book


def list_books(db: Session, owner_id: int | None = None) -> list[Book]:
    """Get all books, optionally only those owned by owner_id."""
    query = db.query(Book)
    if owner_id is not None:
        query = query.filter(Book.owner_id == owner_id)
    return query.order_by(Book.id).all()


def get_book_owner(db: Session, book_id: int) -> tuple[bool, int | None]:
    """Look up a book's owner id.

    Returns (found, owner_id) so an ownerless book can be told apart from a
    missing one.
    """
    row = db.query(Book.owner_id).filter(Book.id == book_id).first()
    if row is None:
        return False, None
    return True, row.owner_id


def update_book(
    db: Session,
    book_id: int,
    title: str | None,
    author: str | None,
    year: int | None,
) -> int:
    """Overwrite title, author and year. Returns the affected row count."""
    count = (
        db.query(Book)
        .filter(Book.id == book_id)
        .update(
            {Book.title: title, Book.author: author, Book.year: year},
            synchronize_session=False,
        )
    )
    db.commit()
    return count


def delete_book(db: Session, book_id: int) -> int:
    """Delete a book. Returns the affected row count."""
    count = db.query(Book).filter(Book.id == book_id).delete(synchronize_session=False)
    db.commit()
    return count
