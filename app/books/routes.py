from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.auth.models import User
from app.books.repository import (
    library, start_book, add_to_wishlist, remove_from_wishlist, start_from_wishlist, wishlist,
)
from app.core.deps import get_current_user, get_game
from app.db.session import get_db
from app.engine.dates import long_label
from app.engine.errors import NotFoundError, ValidationError
from app.engine.game import Game

router = APIRouter(prefix="/api", tags=["books"])


class TitleBody(BaseModel):
    title: Optional[str] = ""


def _title(body: TitleBody) -> str:
    title = (body.title or "").strip()[:200]
    if not title:
        raise ValidationError("Title required")
    return title


# ======================================================
# BOOKS
# ======================================================
@router.get("/books")
def get_books(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return library(db, user.id)


@router.post("/books")
def begin_book(
    body: TitleBody,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    start_book(db, user.id, _title(body), long_label(date.today()))
    return library(db, user.id)


@router.post("/books/{book_id}/finish")
def finish_book(
    book_id: int,
    db: Session = Depends(get_db),
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    awarded = game.finish_book(user.id, book_id)
    return {
        **library(db, user.id),
        "xpAwarded": awarded,
        "totalXP": game.ledger.total_xp(user.id),
    }


# ======================================================
# READING LIST
# ======================================================
@router.post("/reading-list")
def add_reading_list_entry(
    body: TitleBody,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    add_to_wishlist(db, user.id, _title(body))
    return {"wishlist": wishlist(db, user.id)}


@router.delete("/reading-list/{entry_id}")
def delete_reading_list_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    remove_from_wishlist(db, user.id, entry_id)
    return {"wishlist": wishlist(db, user.id)}


@router.post("/reading-list/{entry_id}/start")
def start_reading_list_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not start_from_wishlist(db, user.id, entry_id, long_label(date.today())):
        raise NotFoundError("Entry not found", {"id": entry_id})
    return library(db, user.id)
