from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from app.db.base import Base

QUEST_TAGS = ("weekly", "monthly", "boss")


class Quest(Base):
    __tablename__ = "quests"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(200), nullable=False)
    tag = Column(String(16), nullable=False)  # weekly | monthly | boss
    xp = Column(Integer, nullable=False, default=100)

    # active -> completed, exactly once
    status = Column(String(16), nullable=False, default="active")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("tag IN ('weekly','monthly','boss')", name="ck_quest_tag"),
        CheckConstraint("status IN ('active','completed')", name="ck_quest_status"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "tag": self.tag,
            "xp": self.xp,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
