"""
Storage interfaces the engine depends on.

SQLAlchemy implementations live next to each feature's models
(app/ledger/repository.py, app/daily/repository.py, ...). Repositories only
stage changes; committing is the unit of work's job.
"""
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class UnitOfWork(Protocol):
    def with_transaction(self, fn: Callable[[], T]) -> T: ...


class LedgerRepository(Protocol):
    def get_total(self, user_id: int) -> int: ...

    def set_total(self, user_id: int, total_xp: int) -> None: ...

    def append_entry(self, user_id: int, date_label: str, note: str, xp: int) -> None: ...

    def trim_entries(self, user_id: int, keep: int) -> None: ...

    def clear_entries(self, user_id: int) -> None: ...

    def recent_entries(self, user_id: int, limit: int) -> List[dict]:
        """Newest first, as ``{"date", "note", "xp"}`` dicts."""
        ...


class CompletionRepository(Protocol):
    def get_status(self, user_id: int, category: str, day: date) -> Optional[str]: ...

    def save(self, user_id: int, category: str, day: date, status: str, xp: int) -> None:
        """Insert or overwrite the mark for (user, category, day)."""
        ...

    def for_day(self, user_id: int, day: date) -> Dict[str, dict]: ...

    def completed_counts(self, user_id: int, start: date, end: date) -> Dict[str, int]:
        """Completed marks per category with start <= day <= end."""
        ...


class QuestRepository(Protocol):
    def get_active(self, user_id: int, quest_id: int) -> Optional[dict]:
        """``{"id", "name", "tag", "xp"}`` of an active quest owned by the user."""
        ...

    def mark_completed(self, user_id: int, quest_id: int, when: datetime) -> None: ...


class BookRepository(Protocol):
    def get_reading(self, user_id: int, book_id: int) -> Optional[dict]:
        """``{"id", "title"}`` of a book the user is currently reading."""
        ...

    def mark_completed(self, user_id: int, book_id: int, completed_label: str) -> None: ...

    def count_completed(self, user_id: int) -> int: ...
