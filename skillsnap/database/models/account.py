from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..base import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    roles = Column(String(255), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    portfolio_users = relationship("PortfolioUser", back_populates="account", passive_deletes=True)

    @property
    def role_list(self) -> list[str]:
        return [role for role in (self.roles or "").split(",") if role]
