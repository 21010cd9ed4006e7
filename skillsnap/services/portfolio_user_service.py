from typing import List, Optional

from ..contracts.cache import ICacheService
from ..database.models.portfolio_user import PortfolioUser
from ..database.repositories import PortfolioUserRepository, StaleRecordError
from ..dto.portfolio_user import PortfolioUserRead, PortfolioUserWrite
from ..dto.project import ProjectRead
from ..dto.skill import SkillRead
from ..dto.statistics import PortfolioStatistics, PortfolioUserStatistics
from .caching import CacheInvalidator
from .results import ServiceResult, conflict, not_found, validation_error
from .statistics_service import StatisticsService
from .validation import clean_optional, first_error, is_blank, too_long


def to_portfolio_user_read(portfolio_user: PortfolioUser, with_children: bool = True) -> PortfolioUserRead:
    projects = portfolio_user.projects if with_children else []
    skills = portfolio_user.skills if with_children else []
    return PortfolioUserRead(
        id=portfolio_user.id,
        name=portfolio_user.name,
        bio=portfolio_user.bio,
        profile_image_url=portfolio_user.profile_image_url,
        account_id=portfolio_user.account_id,
        version=portfolio_user.version,
        projects=[ProjectRead.model_validate(project) for project in projects],
        skills=[SkillRead.model_validate(skill) for skill in skills],
    )


class PortfolioUserService:
    def __init__(
        self,
        portfolio_user_repo: PortfolioUserRepository,
        statistics_service: StatisticsService,
        cache: ICacheService,
    ):
        self.portfolio_user_repo = portfolio_user_repo
        self.statistics_service = statistics_service
        self.invalidator = CacheInvalidator(cache)

    async def get_all(self) -> List[PortfolioUserRead]:
        portfolio_users = await self.portfolio_user_repo.list_all()
        return [to_portfolio_user_read(portfolio_user) for portfolio_user in portfolio_users]

    async def get_by_id(self, portfolio_user_id: int) -> ServiceResult[PortfolioUserRead]:
        portfolio_user = await self.portfolio_user_repo.get_by_id(portfolio_user_id)
        if portfolio_user is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        return ServiceResult.success(to_portfolio_user_read(portfolio_user))

    async def search(self, name: Optional[str] = None) -> List[PortfolioUserRead]:
        portfolio_users = await self.portfolio_user_repo.search_by_name(name)
        return [to_portfolio_user_read(portfolio_user) for portfolio_user in portfolio_users]

    async def get_statistics(self) -> PortfolioStatistics:
        return await self.statistics_service.portfolio_statistics()

    async def get_user_statistics(self, portfolio_user_id: int) -> ServiceResult[PortfolioUserStatistics]:
        portfolio_user = await self.portfolio_user_repo.get_by_id(portfolio_user_id)
        if portfolio_user is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        statistics = await self.statistics_service.portfolio_user_statistics(
            portfolio_user_id, portfolio_user.name
        )
        return ServiceResult.success(statistics)

    def _validate(self, data: PortfolioUserWrite) -> Optional[str]:
        if is_blank(data.name):
            return "Name is required."
        if is_blank(data.bio):
            return "Bio is required."
        return first_error(
            too_long("Name", data.name.strip(), 100),
            too_long("Bio", data.bio.strip(), 1000),
            too_long("ProfileImageUrl", clean_optional(data.profile_image_url), 500),
        )

    async def create(
        self, data: PortfolioUserWrite, account_id: Optional[int] = None
    ) -> ServiceResult[PortfolioUserRead]:
        error = self._validate(data)
        if error:
            return validation_error(error)

        portfolio_user = await self.portfolio_user_repo.create(
            name=data.name.strip(),
            bio=data.bio.strip(),
            profile_image_url=clean_optional(data.profile_image_url),
            account_id=account_id,
        )
        return ServiceResult.success(to_portfolio_user_read(portfolio_user, with_children=False))

    async def update(
        self, portfolio_user_id: int, data: PortfolioUserWrite
    ) -> ServiceResult[PortfolioUserRead]:
        if data.id is not None and data.id != portfolio_user_id:
            return validation_error("ID mismatch.")

        error = self._validate(data)
        if error:
            return validation_error(error)

        portfolio_user = await self.portfolio_user_repo.get_by_id(portfolio_user_id)
        if portfolio_user is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")

        if data.version is not None and data.version != portfolio_user.version:
            return conflict(f"Portfolio user with ID {portfolio_user_id} was modified by another request.")

        try:
            portfolio_user = await self.portfolio_user_repo.update(
                portfolio_user,
                name=data.name.strip(),
                bio=data.bio.strip(),
                profile_image_url=clean_optional(data.profile_image_url),
            )
        except StaleRecordError:
            return conflict(
                f"Portfolio user with ID {portfolio_user_id} was modified or deleted by another request."
            )

        return ServiceResult.success(to_portfolio_user_read(portfolio_user))

    async def delete(self, portfolio_user_id: int) -> ServiceResult[None]:
        portfolio_user = await self.portfolio_user_repo.get_by_id(portfolio_user_id)
        if portfolio_user is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")

        try:
            await self.portfolio_user_repo.delete(portfolio_user)
        except StaleRecordError:
            return conflict(
                f"Portfolio user with ID {portfolio_user_id} was modified or deleted by another request."
            )

        # projects and skills went with the owner
        self.invalidator.invalidate_owner(portfolio_user_id)
        return ServiceResult.success()
