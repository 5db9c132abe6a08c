from sqlalchemy import func
from sqlalchemy.orm import Session

from app.books.models import Book, ReadingListEntry


class SqlBookRepository:
    def __init__(self, db: Session):
        self.db = db

    def _reading(self, user_id: int, book_id: int):
        return (
            self.db.query(Book)
            .filter(Book.id == book_id, Book.user_id == user_id, Book.status == "reading")
            .first()
        )

    def get_reading(self, user_id: int, book_id: int):
        book = self._reading(user_id, book_id)
        return {"id": book.id, "title": book.title} if book else None

    def mark_completed(self, user_id: int, book_id: int, completed_label: str) -> None:
        book = self._reading(user_id, book_id)
        book.status = "completed"
        book.completed_at = completed_label
        self.db.flush()

    def count_completed(self, user_id: int) -> int:
        return (
            self.db.query(func.count(Book.id))
            .filter(Book.user_id == user_id, Book.status == "completed")
            .scalar()
        ) or 0


# ---------------------------------------------------------------------------
# Library helpers used by the routes
# ---------------------------------------------------------------------------

def current_book(db: Session, user_id: int):
    book = (
        db.query(Book)
        .filter(Book.user_id == user_id, Book.status == "reading")
        .order_by(Book.created_at.desc(), Book.id.desc())
        .first()
    )
    return book.to_dict() if book else None


def finished_books(db: Session, user_id: int) -> list[dict]:
    # completed_at is a display label, so newest-first follows insertion order
    rows = (
        db.query(Book)
        .filter(Book.user_id == user_id, Book.status == "completed")
        .order_by(Book.id.desc())
        .all()
    )
    return [b.to_dict() for b in rows]


def wishlist(db: Session, user_id: int) -> list[dict]:
    rows = (
        db.query(ReadingListEntry)
        .filter(ReadingListEntry.user_id == user_id)
        .order_by(ReadingListEntry.created_at.asc(), ReadingListEntry.id.asc())
        .all()
    )
    return [r.to_dict() for r in rows]


def library(db: Session, user_id: int) -> dict:
    return {
        "current": current_book(db, user_id),
        "log": finished_books(db, user_id),
        "wishlist": wishlist(db, user_id),
    }


def start_book(db: Session, user_id: int, title: str, started_label: str) -> Book:
    book = Book(user_id=user_id, title=title, status="reading", started_at=started_label)
    db.add(book)
    db.commit()
    db.refresh(book)
    print(f"[BOOK] user={user_id} started id={book.id}", flush=True)
    return book


def add_to_wishlist(db: Session, user_id: int, title: str) -> None:
    db.add(ReadingListEntry(user_id=user_id, title=title))
    db.commit()


def remove_from_wishlist(db: Session, user_id: int, entry_id: int) -> None:
    db.query(ReadingListEntry).filter(
        ReadingListEntry.id == entry_id, ReadingListEntry.user_id == user_id
    ).delete()
    db.commit()


def start_from_wishlist(db: Session, user_id: int, entry_id: int, started_label: str):
    """Move a wishlist entry into the reading state. Returns None if missing."""
    entry = (
        db.query(ReadingListEntry)
        .filter(ReadingListEntry.id == entry_id, ReadingListEntry.user_id == user_id)
        .first()
    )
    if not entry:
        return None
    book = Book(user_id=user_id, title=entry.title, status="reading", started_at=started_label)
    db.add(book)
    db.delete(entry)
    db.commit()
    db.refresh(book)
    return book
