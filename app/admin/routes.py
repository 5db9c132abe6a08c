"""
Administrator API: user leaderboard and ledger resets.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.deps import get_admin, get_game
from app.db.session import get_db
from app.engine.errors import NotFoundError
from app.engine.game import Game
from app.ledger.models import LedgerState

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/users")
def list_users(
    db: Session = Depends(get_db),
    admin: User = Depends(get_admin),
):
    total_xp = func.coalesce(LedgerState.total_xp, 0)
    rows = (
        db.query(User, total_xp.label("total_xp"))
        .outerjoin(LedgerState, LedgerState.user_id == User.id)
        .order_by(total_xp.desc(), User.id.asc())
        .all()
    )
    return [
        {
            "id": u.id,
            "username": u.username,
            "created_at": u.created_at.isoformat() if u.created_at else None,
            "is_admin": bool(u.is_admin),
            "total_xp": xp,
        }
        for u, xp in rows
    ]


@router.post("/reset-user/{user_id}")
def reset_user(
    user_id: int,
    db: Session = Depends(get_db),
    game: Game = Depends(get_game),
    admin: User = Depends(get_admin),
):
    """Zero another user's XP and history (same rule as a self reset)."""
    if not db.get(User, user_id):
        raise NotFoundError("User not found", {"id": user_id})
    game.ledger.reset(user_id)
    print(f"[ADMIN] admin={admin.id} reset user={user_id}", flush=True)
    return {"ok": True}
