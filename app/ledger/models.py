from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.db.base import Base


class LedgerState(Base):
    """Running XP total, one row per user. Never negative."""

    __tablename__ = "ledger_state"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    total_xp = Column(Integer, nullable=False, default=0)


class LedgerEntry(Base):
    """
    One XP change as shown in the history panel.

    Only the newest 50 rows per user are kept; older ones are deleted right
    after every insert.
    """

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    date_label = Column(String(32), nullable=False)  # e.g. "Oct 19"
    note = Column(String(200), nullable=False)
    xp = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
