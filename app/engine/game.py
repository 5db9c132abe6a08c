"""
Per-user game facade assembled from the engine parts.

Routes build one Game per request (see app.core.deps.get_game) and never talk
to the ledger tables directly.
"""
from datetime import date, datetime, timezone
from typing import Optional

from app.engine.daily import DailyQuestTracker
from app.engine.dates import log_label, long_label
from app.engine.errors import NotFoundError
from app.engine.ledger import Ledger
from app.engine.levels import level_of
from app.engine.repositories import (
    BookRepository, CompletionRepository, LedgerRepository, QuestRepository, UnitOfWork,
)
from app.engine.stats import StatAggregator

BOOK_XP = 200


class Game:
    def __init__(
        self,
        ledger_repo: LedgerRepository,
        completions: CompletionRepository,
        quests: QuestRepository,
        books: BookRepository,
        uow: UnitOfWork,
    ):
        self.uow = uow
        self.quests = quests
        self.books = books
        self.ledger = Ledger(ledger_repo, uow)
        self.stats = StatAggregator(completions, books)
        self.daily = DailyQuestTracker(completions, self.ledger, uow)

    def state(self, user_id: int, today: Optional[date] = None) -> dict:
        total = self.ledger.total_xp(user_id)
        return {
            "totalXP": total,
            "level": level_of(total),
            "stats": self.stats.compute(user_id, today),
            "log": self.ledger.history(user_id),
        }

    def complete_quest(self, user_id: int, quest_id: int, today: Optional[date] = None) -> int:
        """Close an active quest and pay its reward. Returns XP awarded."""

        def _complete():
            quest = self.quests.get_active(user_id, quest_id)
            if not quest:
                raise NotFoundError("Quest not found or already completed", {"id": quest_id})
            self.quests.mark_completed(user_id, quest_id, datetime.now(timezone.utc))
            reward = quest["xp"] or 0
            if reward > 0:
                kind = "Boss Defeated" if quest["tag"] == "boss" else "Quest Complete"
                self.ledger.apply_delta(
                    user_id, reward, log_label(today or date.today()), f"{kind}: {quest['name']}"
                )
            return reward

        reward = self.uow.with_transaction(_complete)
        print(f"[QUEST] user={user_id} quest={quest_id} completed xp={reward}", flush=True)
        return reward

    def finish_book(self, user_id: int, book_id: int, today: Optional[date] = None) -> int:
        """Move a book from reading to completed and pay the fixed reward."""
        label = long_label(today or date.today())

        def _finish():
            book = self.books.get_reading(user_id, book_id)
            if not book:
                raise NotFoundError("Book not found", {"id": book_id})
            self.books.mark_completed(user_id, book_id, label)
            self.ledger.apply_delta(user_id, BOOK_XP, label, f"Tome Completed: {book['title']}")
            return BOOK_XP

        reward = self.uow.with_transaction(_finish)
        print(f"[BOOK] user={user_id} book={book_id} finished xp={reward}", flush=True)
        return reward
