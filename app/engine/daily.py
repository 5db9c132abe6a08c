"""
Daily habit marks.

Each (user, category, day) is absent, completed or failed. Moving between
states applies only the payoff difference, so flipping a mark back and forth
never double-counts. Re-sending the current state does nothing.
"""
from datetime import date
from typing import Dict, Optional

from app.engine.dates import log_label, normalize_date
from app.engine.errors import ValidationError
from app.engine.ledger import Ledger
from app.engine.repositories import CompletionRepository, UnitOfWork

COMPLETED = "completed"
FAILED = "failed"
STATUSES = (COMPLETED, FAILED)

# category -> display name and XP per status. Vices pay nothing for being
# avoided and cost 100 when the user slips.
PAYOFFS = {
    "calorie":  {"name": "Calorie Goal",   COMPLETED: 100, FAILED: 0},
    "macro":    {"name": "Macro Goal",     COMPLETED: 100, FAILED: 0},
    "gym":      {"name": "Gym Session",    COMPLETED: 100, FAILED: 0},
    "water":    {"name": "Drink 3L Water", COMPLETED: 100, FAILED: 0},
    "scroll":   {"name": "Doomscrolling",  COMPLETED: 100, FAILED: 0},
    "junkfood": {"name": "Junk Food",      COMPLETED: 0,   FAILED: -100},
    "alcohol":  {"name": "Alcohol",        COMPLETED: 0,   FAILED: -100},
}

CATEGORIES = tuple(PAYOFFS)


def transition_delta(category: str, old_status: Optional[str], new_status: str) -> int:
    """XP change for moving a mark from *old_status* (None = absent) to *new_status*."""
    cfg = PAYOFFS[category]
    if old_status == new_status:
        return 0
    if old_status is None:
        return cfg[new_status]
    return cfg[new_status] - cfg[old_status]


class DailyQuestTracker:
    def __init__(self, completions: CompletionRepository, ledger: Ledger, uow: UnitOfWork):
        self.completions = completions
        self.ledger = ledger
        self.uow = uow

    def for_day(self, user_id: int, raw_date: Optional[str] = None, today: Optional[date] = None) -> Dict[str, dict]:
        day = normalize_date(raw_date, today)
        return self.completions.for_day(user_id, day)

    def mark(
        self,
        user_id: int,
        category: str,
        status: str,
        raw_date: Optional[str] = None,
        today: Optional[date] = None,
    ) -> int:
        """
        Record *status* for *category* on the normalised day.

        Returns the XP delta that was applied (0 for a no-op or a zero payoff).
        """
        if category not in PAYOFFS or status not in STATUSES:
            raise ValidationError("Invalid quest or status", {"questId": category, "status": status})
        day = normalize_date(raw_date, today)
        cfg = PAYOFFS[category]

        def _mark():
            existing = self.completions.get_status(user_id, category, day)
            if existing == status:
                return 0

            delta = transition_delta(category, existing, status)
            self.completions.save(user_id, category, day, status, cfg[status])
            if delta != 0:
                prefix = "Daily" if delta > 0 else "Penalty"
                self.ledger.apply_delta(user_id, delta, log_label(day), f"{prefix}: {cfg['name']}")
            return delta

        delta = self.uow.with_transaction(_mark)
        print(f"[DAILY] user={user_id} quest={category} status={status} date={day} delta={delta}", flush=True)
        return delta
