"""
Stat aggregator.

Five scores in [0, 100], recomputed on every read from the last seven days
of completed daily marks (today inclusive) and the lifetime count of
finished books. Nothing here is stored.

    str = gym / 7
    dis = (scroll + alcohol + junkfood) / 21
    vit = (calorie + macro + water) / 21
    end = (gym + calorie + water) / 21
    wis = all seven / 49 * 60  +  min(40, 8 * books)
"""
import math
from datetime import date, timedelta
from typing import Dict, Optional

from app.engine.repositories import BookRepository, CompletionRepository

WINDOW_DAYS = 7
STAT_MAX = 100
BOOK_WIS_BONUS = 8
BOOK_WIS_CAP = 40

ALL_CATEGORIES = ("calorie", "macro", "gym", "water", "scroll", "junkfood", "alcohol")


def _round(value: float) -> int:
    # Half-up, not banker's rounding
    return int(math.floor(value + 0.5))


def _ratio(count: int, categories: int, scale: int = 100) -> int:
    return _round(count / (WINDOW_DAYS * categories) * scale)


def compute_stats(counts: Dict[str, int], books_read: int = 0) -> Dict[str, int]:
    """Pure scoring function over per-category completed counts."""

    def g(category: str) -> int:
        return max(0, int(counts.get(category, 0) or 0))

    book_bonus = min(BOOK_WIS_CAP, max(0, books_read) * BOOK_WIS_BONUS)
    every_habit = sum(g(c) for c in ALL_CATEGORIES)

    return {
        "str": min(STAT_MAX, _ratio(g("gym"), 1)),
        "dis": min(STAT_MAX, _ratio(g("scroll") + g("alcohol") + g("junkfood"), 3)),
        "vit": min(STAT_MAX, _ratio(g("calorie") + g("macro") + g("water"), 3)),
        "wis": min(STAT_MAX, _ratio(every_habit, 7, scale=60) + book_bonus),
        "end": min(STAT_MAX, _ratio(g("gym") + g("calorie") + g("water"), 3)),
    }


class StatAggregator:
    def __init__(self, completions: CompletionRepository, books: BookRepository):
        self.completions = completions
        self.books = books

    def compute(self, user_id: int, today: Optional[date] = None) -> Dict[str, int]:
        today = today or date.today()
        start = today - timedelta(days=WINDOW_DAYS - 1)
        counts = self.completions.completed_counts(user_id, start, today)
        return compute_stats(counts, self.books.count_completed(user_id))
