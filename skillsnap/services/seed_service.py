from typing import Optional

from ..core.logger import logger
from ..contracts.cache import ICacheService
from ..database.models import PortfolioUser, Project, Skill, SkillLevel
from ..database.repositories import PortfolioUserRepository
from ..dto.base import MessageResponse
from .caching import CacheInvalidator
from .results import ServiceResult, validation_error
from .validation import normalize_name


def build_sample_portfolio(account_id: Optional[int] = None) -> PortfolioUser:
    return PortfolioUser(
        name="Jordan Developer",
        bio="Full-stack developer passionate about learning new tech.",
        profile_image_url="https://example.com/images/jordan.png",
        account_id=account_id,
        projects=[
            Project(
                title="Task Tracker",
                description="Manage tasks effectively.",
                image_url="https://example.com/images/task.png",
            ),
            Project(
                title="Weather App",
                description="Forecast weather using APIs.",
                image_url="https://example.com/images/weather.png",
            ),
        ],
        skills=[
            Skill(
                name="C#",
                normalized_name=normalize_name("C#"),
                level=SkillLevel.ADVANCED.value,
            ),
            Skill(
                name="Blazor",
                normalized_name=normalize_name("Blazor"),
                level=SkillLevel.INTERMEDIATE.value,
            ),
        ],
    )


class SeedService:
    def __init__(self, portfolio_user_repo: PortfolioUserRepository, cache: ICacheService):
        self.portfolio_user_repo = portfolio_user_repo
        self.invalidator = CacheInvalidator(cache)

    async def seed(self, account_id: Optional[int] = None) -> ServiceResult[MessageResponse]:
        if await self.portfolio_user_repo.count() > 0:
            return validation_error("Sample data already exists.")

        await self.portfolio_user_repo.add_with_children([build_sample_portfolio(account_id)])
        self.invalidator.invalidate_everything()
        logger.info("Sample portfolio data inserted")
        return ServiceResult.success(MessageResponse(message="Sample data inserted."))
