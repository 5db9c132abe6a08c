"""
World map unlock data. Static per level; the scoring rules never write here.
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint

from app.db.base import Base

REGIONS = ("ashen", "savanna", "abyss", "throne")
CINEMATIC_REGIONS = ("savanna", "abyss", "throne")


class MapGear(Base):
    """Global gear table, seeded once at startup."""
    __tablename__ = "map_gear"

    id = Column(Integer, primary_key=True, index=True)
    region = Column(String(32), nullable=False)
    type = Column(String(16), nullable=False)  # weapon | armour
    name = Column(String(100), nullable=False)
    unlock_lvl = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("type IN ('weapon','armour')", name="ck_gear_type"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "region": self.region,
            "type": self.type,
            "name": self.name,
            "unlock_lvl": self.unlock_lvl,
        }


class RegionBoss(Base):
    __tablename__ = "region_bosses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    region = Column(String(32), nullable=False)
    level_req = Column(Integer, nullable=False)
    name = Column(String(100), nullable=False)
    subtitle = Column(String(100), nullable=False, default="")
    status = Column(String(16), nullable=False, default="locked")  # locked | active | defeated

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "region": self.region,
            "level_req": self.level_req,
            "name": self.name,
            "subtitle": self.subtitle,
            "status": self.status,
        }


class MapCinematic(Base):
    """Whether the user has watched the intro for a region."""
    __tablename__ = "map_cinematics"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    region = Column(String(32), primary_key=True)
    seen = Column(Boolean, nullable=False, default=False)
