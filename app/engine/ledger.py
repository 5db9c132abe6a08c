"""
XP ledger: the running total plus a bounded history log.

Every XP change in the application goes through Ledger.apply_delta so the
clamp-at-zero rule and the history cap live in one place.
"""
from datetime import date
from typing import List, Optional

from app.engine.dates import log_label
from app.engine.errors import ValidationError
from app.engine.levels import level_of
from app.engine.repositories import LedgerRepository, UnitOfWork

HISTORY_CAP = 50
NOTE_MAX_LEN = 200
DEFAULT_NOTE = "Weekly Update"
# Largest single manual adjustment either way
MAX_MANUAL_XP = 1_000_000


class Ledger:
    def __init__(self, repo: LedgerRepository, uow: UnitOfWork):
        self.repo = repo
        self.uow = uow

    def total_xp(self, user_id: int) -> int:
        return self.repo.get_total(user_id)

    def level(self, user_id: int) -> int:
        return level_of(self.total_xp(user_id))

    def history(self, user_id: int, limit: int = HISTORY_CAP) -> List[dict]:
        return self.repo.recent_entries(user_id, limit)

    def apply_delta(self, user_id: int, delta: int, date_label: str, note: str) -> int:
        """
        Add *delta* to the user's total (floored at 0) and log it.

        The log keeps the requested delta even when the total clamps.
        Returns the new total.
        """
        if not delta:
            raise ValidationError("Invalid XP value", {"xp": delta})

        def _apply():
            current = self.repo.get_total(user_id)
            new_total = max(0, current + delta)
            self.repo.set_total(user_id, new_total)
            self.repo.append_entry(user_id, date_label, note[:NOTE_MAX_LEN], delta)
            self.repo.trim_entries(user_id, HISTORY_CAP)
            return new_total

        new_total = self.uow.with_transaction(_apply)
        print(f"[LEDGER] user={user_id} delta={delta:+d} total={new_total} note='{note[:60]}'", flush=True)
        return new_total

    def adjust(self, user_id: int, xp, note: Optional[str] = None, today: Optional[date] = None) -> int:
        """Manual adjustment from the XP form."""
        if isinstance(xp, bool):
            raise ValidationError("Invalid XP value", {"xp": xp})
        try:
            delta = int(xp)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("Invalid XP value", {"xp": xp})
        if delta == 0 or abs(delta) > MAX_MANUAL_XP:
            raise ValidationError("Invalid XP value", {"xp": xp})

        note = str(note or DEFAULT_NOTE)
        return self.apply_delta(user_id, delta, log_label(today or date.today()), note)

    def reset(self, user_id: int) -> None:
        """Zero the total and drop the history. Daily marks are left alone."""

        def _reset():
            self.repo.set_total(user_id, 0)
            self.repo.clear_entries(user_id)

        self.uow.with_transaction(_reset)
        print(f"[LEDGER] user={user_id} reset", flush=True)
