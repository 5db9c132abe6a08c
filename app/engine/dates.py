"""
Date handling for daily marks and ledger labels.
"""
import re
from datetime import date, datetime, timedelta
from typing import Optional

from app.engine.errors import ValidationError

MAX_BACKDATE_DAYS = 60

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(value: Optional[str], today: Optional[date] = None) -> date:
    """
    Resolve a client-supplied YYYY-MM-DD string to the day a mark applies to.

    - missing / malformed -> today
    - in the future       -> today (clock skew is tolerated)
    - older than 60 days  -> ValidationError
    """
    today = today or date.today()
    if not value or not isinstance(value, str) or not _ISO_DATE.match(value):
        return today
    try:
        day = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        # Shaped like a date but not one (e.g. 2026-02-30)
        return today

    if day > today:
        return today
    if day < today - timedelta(days=MAX_BACKDATE_DAYS):
        raise ValidationError("Date out of range", {"date": value})
    return day


def log_label(day: date) -> str:
    """Short ledger label, e.g. ``Oct 19``."""
    return f"{day:%b} {day.day}"


def long_label(day: date) -> str:
    """Label used for reading history, e.g. ``Oct 19, 2026``."""
    return f"{day:%b} {day.day}, {day.year}"
