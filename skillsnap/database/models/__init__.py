from .account import Account
from .portfolio_user import PortfolioUser
from .project import Project
from .skill import Skill, SkillLevel

__all__ = ["Account", "PortfolioUser", "Project", "Skill", "SkillLevel"]
