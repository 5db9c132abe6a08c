from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.daily.models import DailyCompletion, QuestLabel


class SqlCompletionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_status(self, user_id: int, category: str, day: date):
        row = self.db.get(DailyCompletion, (user_id, category, day))
        return row.status if row else None

    def save(self, user_id: int, category: str, day: date, status: str, xp: int) -> None:
        row = self.db.get(DailyCompletion, (user_id, category, day))
        if row is None:
            self.db.add(DailyCompletion(user_id=user_id, category=category, date=day, status=status, xp=xp))
        else:
            row.status = status
            row.xp = xp
        self.db.flush()

    def for_day(self, user_id: int, day: date) -> dict:
        rows = (
            self.db.query(DailyCompletion)
            .filter(DailyCompletion.user_id == user_id, DailyCompletion.date == day)
            .all()
        )
        return {r.category: {"status": r.status, "xp": r.xp} for r in rows}

    def completed_counts(self, user_id: int, start: date, end: date) -> dict:
        rows = (
            self.db.query(DailyCompletion.category, func.count())
            .filter(
                DailyCompletion.user_id == user_id,
                DailyCompletion.status == "completed",
                DailyCompletion.date >= start,
                DailyCompletion.date <= end,
            )
            .group_by(DailyCompletion.category)
            .all()
        )
        return {category: int(count) for category, count in rows}


# ---------------------------------------------------------------------------
# Labels (not part of the scoring engine)
# ---------------------------------------------------------------------------

def get_labels(db: Session, user_id: int) -> dict:
    rows = db.query(QuestLabel).filter(QuestLabel.user_id == user_id).all()
    return {r.category: r.label for r in rows}


def set_label(db: Session, user_id: int, category: str, label: str) -> None:
    row = db.get(QuestLabel, (user_id, category))
    if row is None:
        db.add(QuestLabel(user_id=user_id, category=category, label=label))
    else:
        row.label = label
    db.commit()
