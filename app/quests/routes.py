from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.deps import get_current_user, get_game
from app.db.session import get_db
from app.engine.errors import ValidationError
from app.engine.game import Game
from app.quests.models import QUEST_TAGS
from app.quests.repository import quest_board, create_quest, delete_quest

router = APIRouter(prefix="/api/quests", tags=["quests"])


class NewQuest(BaseModel):
    name: Optional[str] = ""
    tag: Optional[str] = None
    xp: Any = 0


def _reward(value) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


@router.get("")
def list_quests(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return quest_board(db, user.id)


@router.post("")
def add_quest(
    body: NewQuest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    name = (body.name or "").strip()[:200]
    if not name or body.tag not in QUEST_TAGS:
        raise ValidationError("Invalid quest data")
    create_quest(db, user.id, name, body.tag, _reward(body.xp))
    return quest_board(db, user.id)


@router.post("/{quest_id}/complete")
def complete_quest(
    quest_id: int,
    db: Session = Depends(get_db),
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    """Close an active quest; bosses and regular quests both pay their xp."""
    awarded = game.complete_quest(user.id, quest_id)
    return {
        **game.state(user.id),
        **quest_board(db, user.id),
        "xpAwarded": awarded,
    }


@router.delete("/{quest_id}")
def remove_quest(
    quest_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    delete_quest(db, user.id, quest_id)
    return quest_board(db, user.id)
