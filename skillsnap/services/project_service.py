from typing import List, Optional

from ..contracts.cache import ICacheService
from ..core.logger import logger
from ..database.repositories import (
    IntegrityViolationError,
    PortfolioUserRepository,
    ProjectRepository,
    StaleRecordError,
)
from ..dto.project import ProjectRead, ProjectWrite
from ..dto.statistics import ProjectStatistics
from .caching import CacheInvalidator, CacheKeys, listing_policy, read_through, statistics_policy
from .results import ServiceResult, conflict, not_found, validation_error
from .statistics_service import StatisticsService
from .validation import clean_optional, first_error, is_blank, too_long


class ProjectService:
    def __init__(
        self,
        project_repo: ProjectRepository,
        portfolio_user_repo: PortfolioUserRepository,
        statistics_service: StatisticsService,
        cache: ICacheService,
    ):
        self.project_repo = project_repo
        self.portfolio_user_repo = portfolio_user_repo
        self.statistics_service = statistics_service
        self.cache = cache
        self.invalidator = CacheInvalidator(cache)

    async def get_all(self) -> List[ProjectRead]:
        async def load():
            projects = await self.project_repo.list_all()
            return [ProjectRead.model_validate(project) for project in projects]

        return await read_through(self.cache, CacheKeys.ALL_PROJECTS, listing_policy(), load)

    async def get_by_id(self, project_id: int) -> ServiceResult[ProjectRead]:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return not_found(f"Project with ID {project_id} not found.")
        return ServiceResult.success(ProjectRead.model_validate(project))

    async def get_by_owner(self, portfolio_user_id: int) -> ServiceResult[List[ProjectRead]]:
        async def load():
            if not await self.portfolio_user_repo.exists(portfolio_user_id):
                return None
            projects = await self.project_repo.list_by_owner(portfolio_user_id)
            return [ProjectRead.model_validate(project) for project in projects]

        projects = await read_through(
            self.cache,
            CacheKeys.projects_for_owner(portfolio_user_id),
            listing_policy(),
            load,
        )
        if projects is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        return ServiceResult.success(projects)

    async def search(
        self, title: Optional[str] = None, portfolio_user_id: Optional[int] = None
    ) -> List[ProjectRead]:
        projects = await self.project_repo.search(title=title, portfolio_user_id=portfolio_user_id)
        return [ProjectRead.model_validate(project) for project in projects]

    async def get_statistics(self) -> ProjectStatistics:
        return await read_through(
            self.cache,
            CacheKeys.PROJECTS_STATISTICS,
            statistics_policy(),
            self.statistics_service.project_statistics,
        )

    def _validate(self, data: ProjectWrite) -> Optional[str]:
        if is_blank(data.title):
            return "Title is required."
        if is_blank(data.description):
            return "Description is required."
        if data.portfolio_user_id is None or data.portfolio_user_id <= 0:
            return "Valid PortfolioUserId is required."
        return first_error(
            too_long("Title", data.title.strip(), 200),
            too_long("Description", data.description.strip(), 2000),
            too_long("ImageUrl", clean_optional(data.image_url), 500),
        )

    async def _owner_missing(self, portfolio_user_id: int) -> Optional[ServiceResult]:
        if not await self.portfolio_user_repo.exists(portfolio_user_id):
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        return None

    async def create(self, data: ProjectWrite) -> ServiceResult[ProjectRead]:
        error = self._validate(data)
        if error:
            return validation_error(error)

        owner_id = data.portfolio_user_id
        missing = await self._owner_missing(owner_id)
        if missing:
            return missing

        try:
            project = await self.project_repo.create(
                portfolio_user_id=owner_id,
                title=data.title.strip(),
                description=data.description.strip(),
                image_url=clean_optional(data.image_url),
            )
        except IntegrityViolationError:
            return await self._owner_missing(owner_id) or conflict(
                "The project could not be saved because of a concurrent change."
            )

        created = ProjectRead.model_validate(project)
        self.invalidator.invalidate_projects(owner_id)
        return ServiceResult.success(created)

    async def update(self, project_id: int, data: ProjectWrite) -> ServiceResult[ProjectRead]:
        if data.id is not None and data.id != project_id:
            return validation_error("ID mismatch.")

        error = self._validate(data)
        if error:
            return validation_error(error)

        new_owner_id = data.portfolio_user_id
        missing = await self._owner_missing(new_owner_id)
        if missing:
            return missing

        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return not_found(f"Project with ID {project_id} not found.")

        if data.version is not None and data.version != project.version:
            return conflict(f"Project with ID {project_id} was modified by another request.")

        original_owner_id = project.portfolio_user_id
        try:
            project = await self.project_repo.update(
                project,
                portfolio_user_id=new_owner_id,
                title=data.title.strip(),
                description=data.description.strip(),
                image_url=clean_optional(data.image_url),
            )
        except StaleRecordError:
            return conflict(f"Project with ID {project_id} was modified or deleted by another request.")
        except IntegrityViolationError:
            return await self._owner_missing(new_owner_id) or conflict(
                f"Project with ID {project_id} could not be saved because of a concurrent change."
            )

        updated = ProjectRead.model_validate(project)
        self.invalidator.invalidate_projects(original_owner_id, new_owner_id)
        return ServiceResult.success(updated)

    async def delete(self, project_id: int) -> ServiceResult[None]:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return not_found(f"Project with ID {project_id} not found.")

        owner_id = project.portfolio_user_id
        try:
            await self.project_repo.delete(project)
        except StaleRecordError:
            return conflict(f"Project with ID {project_id} was modified or deleted by another request.")

        self.invalidator.invalidate_projects(owner_id)
        logger.info(f"Project {project_id} removed from portfolio user {owner_id}")
        return ServiceResult.success()
