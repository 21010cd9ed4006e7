from .database import get_db, create_engine, create_session_factory, create_tables
from .models import Account, PortfolioUser, Project, Skill

__all__ = [
    "get_db",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "Account",
    "PortfolioUser",
    "Project",
    "Skill",
]
