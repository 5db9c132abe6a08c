from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.deps import get_current_user, get_game
from app.db.session import get_db
from app.engine.errors import ValidationError
from app.engine.game import Game
from app.engine.levels import level_of, xp_to_next_level
from app.map.models import CINEMATIC_REGIONS, MapCinematic, MapGear, RegionBoss
from app.quests.models import Quest

router = APIRouter(prefix="/api/map", tags=["map"])


class CinematicSeen(BaseModel):
    region: Optional[str] = None


@router.get("")
def get_map(
    db: Session = Depends(get_db),
    game: Game = Depends(get_game),
    user: User = Depends(get_current_user),
):
    """Everything the world map needs: level, unlocks and the boss roster."""
    total = game.ledger.total_xp(user.id)
    level = level_of(total)

    cinematics = db.query(MapCinematic).filter(MapCinematic.user_id == user.id).all()
    gear = db.query(MapGear).order_by(MapGear.id.asc()).all()
    quests = (
        db.query(Quest)
        .filter(Quest.user_id == user.id)
        .order_by(Quest.created_at.asc(), Quest.id.asc())
        .all()
    )
    region_bosses = (
        db.query(RegionBoss)
        .filter(RegionBoss.user_id == user.id)
        .order_by(RegionBoss.region, RegionBoss.level_req.asc())
        .all()
    )

    return {
        "level": level,
        "total_xp": total,
        "progress": xp_to_next_level(total),
        "cinematics": [{"region": c.region, "seen": bool(c.seen)} for c in cinematics],
        "gear": [{**g.to_dict(), "unlocked": level >= g.unlock_lvl} for g in gear],
        "bosses": [
            {"id": q.id, "name": q.name, "status": q.status, "xp": q.xp, "tag": q.tag}
            for q in quests if q.tag == "boss"
        ],
        "quests": [
            {"id": q.id, "name": q.name, "tag": q.tag, "status": q.status, "xp": q.xp}
            for q in quests
        ],
        "regionBosses": [{**b.to_dict(), "unlocked": level >= b.level_req} for b in region_bosses],
    }


@router.post("/cinematic-seen")
def mark_cinematic_seen(
    body: CinematicSeen,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if body.region not in CINEMATIC_REGIONS:
        raise ValidationError("Invalid region")
    row = db.get(MapCinematic, (user.id, body.region))
    if row is None:
        db.add(MapCinematic(user_id=user.id, region=body.region, seen=True))
    else:
        row.seen = True
    db.commit()
    return {"ok": True}
