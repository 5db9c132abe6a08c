from sqlalchemy import select
from sqlalchemy.orm import Session

from app.ledger.models import LedgerEntry, LedgerState


class SqlLedgerRepository:
    def __init__(self, db: Session):
        self.db = db

    def _state(self, user_id: int) -> LedgerState:
        state = self.db.get(LedgerState, user_id)
        if state is None:
            state = LedgerState(user_id=user_id, total_xp=0)
            self.db.add(state)
            self.db.flush()
        return state

    def get_total(self, user_id: int) -> int:
        state = self.db.get(LedgerState, user_id)
        return state.total_xp if state else 0

    def set_total(self, user_id: int, total_xp: int) -> None:
        self._state(user_id).total_xp = total_xp
        self.db.flush()

    def append_entry(self, user_id: int, date_label: str, note: str, xp: int) -> None:
        self.db.add(LedgerEntry(user_id=user_id, date_label=date_label, note=note, xp=xp))
        self.db.flush()

    def trim_entries(self, user_id: int, keep: int) -> None:
        keep_ids = (
            select(LedgerEntry.id)
            .where(LedgerEntry.user_id == user_id)
            .order_by(LedgerEntry.id.desc())
            .limit(keep)
        )
        (
            self.db.query(LedgerEntry)
            .filter(LedgerEntry.user_id == user_id, LedgerEntry.id.notin_(keep_ids))
            .delete(synchronize_session=False)
        )

    def clear_entries(self, user_id: int) -> None:
        self.db.query(LedgerEntry).filter(LedgerEntry.user_id == user_id).delete(synchronize_session=False)

    def recent_entries(self, user_id: int, limit: int) -> list[dict]:
        rows = (
            self.db.query(LedgerEntry)
            .filter(LedgerEntry.user_id == user_id)
            .order_by(LedgerEntry.id.desc())
            .limit(limit)
            .all()
        )
        return [{"date": r.date_label, "note": r.note, "xp": r.xp} for r in rows]
