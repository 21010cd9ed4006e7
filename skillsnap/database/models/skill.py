from enum import Enum
from typing import Optional

from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..base import Base


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    NOVICE = "Novice"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    MASTER = "Master"

    @classmethod
    def parse(cls, value: str) -> Optional["SkillLevel"]:
        """Case-insensitive lookup; returns None for unknown levels."""
        normalized = value.strip().lower()
        for level in cls:
            if level.value.lower() == normalized:
                return level
        return None


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    # casefolded name, the unit of per-owner uniqueness
    normalized_name = Column(String(300), nullable=False)
    level = Column(String(20), nullable=False)
    portfolio_user_id = Column(
        Integer,
        ForeignKey("portfolio_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(Integer, nullable=False, default=1)

    portfolio_user = relationship("PortfolioUser", back_populates="skills")

    __table_args__ = (
        Index("ux_skills_owner_name", portfolio_user_id, normalized_name, unique=True),
    )
    __mapper_args__ = {"version_id_col": version}
