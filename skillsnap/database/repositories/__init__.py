from .account_repository import AccountRepository
from .portfolio_user_repository import PortfolioUserRepository
from .project_repository import ProjectRepository
from .skill_repository import SkillRepository
from .statistics_repository import StatisticsRepository
from .exceptions import RepositoryError, StaleRecordError, IntegrityViolationError

__all__ = [
    "AccountRepository",
    "PortfolioUserRepository",
    "ProjectRepository",
    "SkillRepository",
    "StatisticsRepository",
    "RepositoryError",
    "StaleRecordError",
    "IntegrityViolationError",
]
