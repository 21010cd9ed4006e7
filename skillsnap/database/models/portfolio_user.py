from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base


class PortfolioUser(Base):
    __tablename__ = "portfolio_users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    bio = Column(String(1000), nullable=False)
    profile_image_url = Column(String(500), nullable=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)
    version = Column(Integer, nullable=False, default=1)

    account = relationship("Account", back_populates="portfolio_users")
    projects = relationship(
        "Project",
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        order_by="Project.id",
    )
    skills = relationship(
        "Skill",
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        order_by="Skill.id",
    )

    __mapper_args__ = {"version_id_col": version}
