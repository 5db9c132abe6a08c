"""
Account creation.

- The first account ever created is the administrator. The check runs once,
  inside the same transaction that inserts the user, and is never revisited.
- Every new account is seeded with its ledger row, labels, starter quests,
  region bosses and map cinematics.
"""
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.security import hash_password
from app.core.seed_data import DEFAULT_QUEST_LABELS, DEFAULT_QUESTS, MAP_GEAR, REGION_BOSSES
from app.daily.models import QuestLabel
from app.engine.errors import ValidationError
from app.ledger.models import LedgerState
from app.map.models import CINEMATIC_REGIONS, MapCinematic, MapGear, RegionBoss
from app.quests.models import Quest

USERNAME_RE = re.compile(r"^[a-zA-Z0-9]{3,20}$")
MIN_PASSWORD_LEN = 8


class UsernameTaken(Exception):
    pass


def no_users_exist(db: Session) -> bool:
    return db.query(User.id).first() is None


def seed_user_data(db: Session, user_id: int) -> None:
    """Insert starter rows for *user_id*. Skips anything already present."""
    if db.get(LedgerState, user_id) is None:
        db.add(LedgerState(user_id=user_id, total_xp=0))

    for region in CINEMATIC_REGIONS:
        if db.get(MapCinematic, (user_id, region)) is None:
            db.add(MapCinematic(user_id=user_id, region=region, seen=False))

    for category, label in DEFAULT_QUEST_LABELS:
        if db.get(QuestLabel, (user_id, category)) is None:
            db.add(QuestLabel(user_id=user_id, category=category, label=label))

    if not db.query(Quest.id).filter(Quest.user_id == user_id).first():
        for q in DEFAULT_QUESTS:
            db.add(Quest(user_id=user_id, name=q["name"], tag=q["tag"], xp=q["xp"], status="active"))

    if not db.query(RegionBoss.id).filter(RegionBoss.user_id == user_id).first():
        for region, level_req, name, subtitle in REGION_BOSSES:
            db.add(RegionBoss(
                user_id=user_id,
                region=region,
                level_req=level_req,
                name=name,
                subtitle=subtitle,
                status="active" if level_req == 1 else "locked",
            ))
    db.flush()
    print(f"[SEED] user={user_id} starter data ready", flush=True)


def seed_gear(db: Session) -> None:
    """Fill the global gear table if it is empty."""
    if db.query(MapGear.id).first():
        return
    for region, gear_type, name, unlock_lvl in MAP_GEAR:
        db.add(MapGear(region=region, type=gear_type, name=name, unlock_lvl=unlock_lvl))
    db.commit()
    print(f"[SEED] map_gear seeded ({len(MAP_GEAR)} rows)", flush=True)


def register_user(db: Session, username: str, password: str) -> User:
    username = (username or "").strip()
    password = password or ""

    if not USERNAME_RE.match(username):
        raise ValidationError("Username must be 3-20 alphanumeric characters")
    if len(password) < MIN_PASSWORD_LEN:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LEN} characters")
    if db.query(User.id).filter(User.username == username).first():
        raise UsernameTaken(username)

    password_hash = hash_password(password)

    try:
        user = User(
            username=username,
            password_hash=password_hash,
            is_admin=no_users_exist(db),
        )
        db.add(user)
        db.flush()
        seed_user_data(db, user.id)
        db.commit()
    except IntegrityError:
        # Lost a race with another signup for the same name
        db.rollback()
        raise UsernameTaken(username)

    db.refresh(user)
    print(f"[AUTH] registered user={user.id} username={user.username} admin={user.is_admin}", flush=True)
    return user
