from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(String(2000), nullable=False)
    image_url = Column(String(500), nullable=True)
    portfolio_user_id = Column(
        Integer,
        ForeignKey("portfolio_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(Integer, nullable=False, default=1)

    portfolio_user = relationship("PortfolioUser", back_populates="projects")

    __mapper_args__ = {"version_id_col": version}
