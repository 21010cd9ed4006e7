from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..contracts.cache import ICacheService
from ..database import get_db
from ..database.repositories import (
    PortfolioUserRepository,
    ProjectRepository,
    SkillRepository,
    StatisticsRepository,
)
from ..services.portfolio_user_service import PortfolioUserService
from ..services.project_service import ProjectService
from ..services.seed_service import SeedService
from ..services.skill_service import SkillService
from ..services.statistics_service import StatisticsService
from .common import get_cache


def get_portfolio_user_repository(db: AsyncSession = Depends(get_db)) -> PortfolioUserRepository:
    return PortfolioUserRepository(db)


def get_project_repository(db: AsyncSession = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)


def get_skill_repository(db: AsyncSession = Depends(get_db)) -> SkillRepository:
    return SkillRepository(db)


def get_statistics_service(db: AsyncSession = Depends(get_db)) -> StatisticsService:
    return StatisticsService(StatisticsRepository(db))


def get_portfolio_user_service(
    portfolio_user_repo: PortfolioUserRepository = Depends(get_portfolio_user_repository),
    statistics_service: StatisticsService = Depends(get_statistics_service),
    cache: ICacheService = Depends(get_cache),
) -> PortfolioUserService:
    return PortfolioUserService(
        portfolio_user_repo=portfolio_user_repo,
        statistics_service=statistics_service,
        cache=cache,
    )


def get_project_service(
    project_repo: ProjectRepository = Depends(get_project_repository),
    portfolio_user_repo: PortfolioUserRepository = Depends(get_portfolio_user_repository),
    statistics_service: StatisticsService = Depends(get_statistics_service),
    cache: ICacheService = Depends(get_cache),
) -> ProjectService:
    return ProjectService(
        project_repo=project_repo,
        portfolio_user_repo=portfolio_user_repo,
        statistics_service=statistics_service,
        cache=cache,
    )


def get_skill_service(
    skill_repo: SkillRepository = Depends(get_skill_repository),
    portfolio_user_repo: PortfolioUserRepository = Depends(get_portfolio_user_repository),
    statistics_service: StatisticsService = Depends(get_statistics_service),
    cache: ICacheService = Depends(get_cache),
) -> SkillService:
    return SkillService(
        skill_repo=skill_repo,
        portfolio_user_repo=portfolio_user_repo,
        statistics_service=statistics_service,
        cache=cache,
    )


def get_seed_service(
    portfolio_user_repo: PortfolioUserRepository = Depends(get_portfolio_user_repository),
    cache: ICacheService = Depends(get_cache),
) -> SeedService:
    return SeedService(portfolio_user_repo=portfolio_user_repo, cache=cache)
