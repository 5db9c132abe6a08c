"""
Daily habit marks and their per-user display labels.
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey

from app.db.base import Base


class DailyCompletion(Base):
    """
    One completed/failed mark per user, category and calendar day.
    Feeds both the ledger (on change) and the 7-day stat window.
    """
    __tablename__ = "daily_completions"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    category = Column(String(32), primary_key=True)
    date = Column(Date, primary_key=True)

    status = Column(String(16), nullable=False)  # completed | failed
    xp = Column(Integer, nullable=False, default=0)


class QuestLabel(Base):
    """User-editable caption for a daily category (cosmetic only)."""
    __tablename__ = "quest_labels"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    category = Column(String(32), primary_key=True)
    label = Column(String(100), nullable=False)
