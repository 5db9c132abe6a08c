from datetime import datetime

from sqlalchemy.orm import Session

from app.quests.models import Quest


class SqlQuestRepository:
    def __init__(self, db: Session):
        self.db = db

    def _active(self, user_id: int, quest_id: int):
        return (
            self.db.query(Quest)
            .filter(Quest.id == quest_id, Quest.user_id == user_id, Quest.status == "active")
            .first()
        )

    def get_active(self, user_id: int, quest_id: int):
        quest = self._active(user_id, quest_id)
        if not quest:
            return None
        return {"id": quest.id, "name": quest.name, "tag": quest.tag, "xp": quest.xp}

    def mark_completed(self, user_id: int, quest_id: int, when: datetime) -> None:
        quest = self._active(user_id, quest_id)
        quest.status = "completed"
        quest.completed_at = when
        self.db.flush()


# ---------------------------------------------------------------------------
# Quest board helpers used by the routes
# ---------------------------------------------------------------------------

def quest_board(db: Session, user_id: int) -> dict:
    """Active quests oldest first, completed quests newest first."""
    active = (
        db.query(Quest)
        .filter(Quest.user_id == user_id, Quest.status == "active")
        .order_by(Quest.created_at.asc(), Quest.id.asc())
        .all()
    )
    completed = (
        db.query(Quest)
        .filter(Quest.user_id == user_id, Quest.status == "completed")
        .order_by(Quest.completed_at.desc(), Quest.id.desc())
        .all()
    )
    return {
        "active": [q.to_dict() for q in active],
        "completed": [q.to_dict() for q in completed],
    }


def create_quest(db: Session, user_id: int, name: str, tag: str, xp: int) -> Quest:
    quest = Quest(user_id=user_id, name=name, tag=tag, xp=xp, status="active")
    db.add(quest)
    db.commit()
    db.refresh(quest)
    print(f"[QUEST] user={user_id} created id={quest.id} tag={tag} xp={xp}", flush=True)
    return quest


def delete_quest(db: Session, user_id: int, quest_id: int) -> None:
    db.query(Quest).filter(Quest.id == quest_id, Quest.user_id == user_id).delete()
    db.commit()
