"""
API routes for XP, daily habit marks and the player's state.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.deps import get_current_user, get_game
from app.daily.repository import get_labels, set_label
from app.db.session import get_db
from app.engine.daily import CATEGORIES
from app.engine.game import Game

router = APIRouter(prefix="/api", tags=["api"])


class XpAdjustment(BaseModel):
    xp: Any = None
    note: Optional[str] = None


class DailyMark(BaseModel):
    questId: Optional[str] = None
    status: Optional[str] = None
    date: Optional[str] = None


class LabelUpdate(BaseModel):
    label: Optional[str] = ""


@router.get("/state")
def get_state(
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    """Total XP, level, the five stats and the recent XP log."""
    return game.state(user.id)


@router.post("/xp")
def adjust_xp(
    body: XpAdjustment,
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    total = game.ledger.adjust(user.id, body.xp, body.note)
    return {"totalXP": total, "log": game.ledger.history(user.id)}


@router.get("/daily-quests")
def get_daily_quests(
    date: Optional[str] = Query(None),
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    return game.daily.for_day(user.id, date)


@router.post("/daily-quests")
def mark_daily_quest(
    body: DailyMark,
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    """Mark a habit completed/failed; flipping a mark only applies the difference."""
    delta = game.daily.mark(user.id, body.questId, body.status, body.date)
    return {**game.state(user.id), "xpAwarded": delta}


@router.post("/reset")
def reset_progress(
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    """Zero XP and clear the log. Daily marks (and so stats) are kept."""
    game.ledger.reset(user.id)
    return {"ok": True}


@router.get("/quest-labels")
def get_quest_labels(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return get_labels(db, user.id)


@router.patch("/quest-labels/{category}")
def update_quest_label(
    category: str,
    body: LabelUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    label = (body.label or "").strip()[:100]
    if category not in CATEGORIES or not label:
        raise HTTPException(status_code=400, detail="Invalid")
    set_label(db, user.id, category, label)
    return {"ok": True, "questId": category, "label": label}
