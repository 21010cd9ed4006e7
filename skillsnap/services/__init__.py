from .auth_service import AuthService
from .portfolio_user_service import PortfolioUserService
from .project_service import ProjectService
from .seed_service import SeedService
from .skill_service import SkillService
from .statistics_service import StatisticsService

__all__ = [
    "AuthService",
    "PortfolioUserService",
    "ProjectService",
    "SeedService",
    "SkillService",
    "StatisticsService",
]
