from typing import List, Optional

from ..contracts.cache import ICacheService
from ..core.logger import logger
from ..database.models.skill import SkillLevel
from ..database.repositories import (
    IntegrityViolationError,
    PortfolioUserRepository,
    SkillRepository,
    StaleRecordError,
)
from ..dto.skill import SkillRead, SkillWrite
from ..dto.statistics import SkillStatistics
from .caching import CacheInvalidator, CacheKeys, listing_policy, read_through, statistics_policy
from .results import ServiceResult, conflict, duplicate, not_found, validation_error
from .statistics_service import StatisticsService
from .validation import first_error, is_blank, normalize_name, too_long

VALID_LEVELS_MESSAGE = ", ".join(level.value for level in SkillLevel)


class SkillService:
    def __init__(
        self,
        skill_repo: SkillRepository,
        portfolio_user_repo: PortfolioUserRepository,
        statistics_service: StatisticsService,
        cache: ICacheService,
    ):
        self.skill_repo = skill_repo
        self.portfolio_user_repo = portfolio_user_repo
        self.statistics_service = statistics_service
        self.cache = cache
        self.invalidator = CacheInvalidator(cache)

    @staticmethod
    def levels() -> List[str]:
        return [level.value for level in SkillLevel]

    async def get_all(self) -> List[SkillRead]:
        async def load():
            skills = await self.skill_repo.list_all()
            return [SkillRead.model_validate(skill) for skill in skills]

        return await read_through(self.cache, CacheKeys.ALL_SKILLS, listing_policy(), load)

    async def get_by_id(self, skill_id: int) -> ServiceResult[SkillRead]:
        skill = await self.skill_repo.get_by_id(skill_id)
        if skill is None:
            return not_found(f"Skill with ID {skill_id} not found.")
        return ServiceResult.success(SkillRead.model_validate(skill))

    async def get_by_owner(self, portfolio_user_id: int) -> ServiceResult[List[SkillRead]]:
        async def load():
            if not await self.portfolio_user_repo.exists(portfolio_user_id):
                return None
            skills = await self.skill_repo.list_by_owner(portfolio_user_id)
            return [SkillRead.model_validate(skill) for skill in skills]

        skills = await read_through(
            self.cache,
            CacheKeys.skills_for_owner(portfolio_user_id),
            listing_policy(),
            load,
        )
        if skills is None:
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        return ServiceResult.success(skills)

    async def get_by_level(self, level: str) -> ServiceResult[List[SkillRead]]:
        parsed = SkillLevel.parse(level)
        if parsed is None:
            return validation_error(f"Invalid skill level. Valid levels are: {VALID_LEVELS_MESSAGE}")
        skills = await self.skill_repo.list_by_level(parsed.value)
        return ServiceResult.success([SkillRead.model_validate(skill) for skill in skills])

    async def search(
        self,
        name: Optional[str] = None,
        level: Optional[str] = None,
        portfolio_user_id: Optional[int] = None,
    ) -> List[SkillRead]:
        skills = await self.skill_repo.search(
            name=name, level=level, portfolio_user_id=portfolio_user_id
        )
        return [SkillRead.model_validate(skill) for skill in skills]

    async def get_statistics(self) -> SkillStatistics:
        return await read_through(
            self.cache,
            CacheKeys.SKILLS_STATISTICS,
            statistics_policy(),
            self.statistics_service.skill_statistics,
        )

    def _validate(self, data: SkillWrite) -> Optional[str]:
        if is_blank(data.name):
            return "Name is required."
        if is_blank(data.level):
            return "Level is required."
        if data.portfolio_user_id is None or data.portfolio_user_id <= 0:
            return "Valid PortfolioUserId is required."
        if SkillLevel.parse(data.level) is None:
            return f"Invalid skill level. Valid levels are: {VALID_LEVELS_MESSAGE}"
        return first_error(too_long("Name", data.name.strip(), 100))

    async def _owner_missing(self, portfolio_user_id: int) -> Optional[ServiceResult]:
        if not await self.portfolio_user_repo.exists(portfolio_user_id):
            return not_found(f"Portfolio user with ID {portfolio_user_id} not found.")
        return None

    async def create(self, data: SkillWrite) -> ServiceResult[SkillRead]:
        error = self._validate(data)
        if error:
            return validation_error(error)

        owner_id = data.portfolio_user_id
        name = data.name.strip()
        normalized_name = normalize_name(name)
        level = SkillLevel.parse(data.level).value

        missing = await self._owner_missing(owner_id)
        if missing:
            return missing

        if await self.skill_repo.find_by_owner_and_name(owner_id, normalized_name):
            logger.warning(f"Duplicate skill '{name}' rejected for portfolio user {owner_id}")
            return duplicate(
                f"The user already has the skill '{name}'. Use PUT to update the skill level."
            )

        try:
            skill = await self.skill_repo.create(
                portfolio_user_id=owner_id,
                name=name,
                normalized_name=normalized_name,
                level=level,
            )
        except IntegrityViolationError:
            return await self._owner_missing(owner_id) or duplicate(
                f"The user already has the skill '{name}'. Use PUT to update the skill level."
            )

        created = SkillRead.model_validate(skill)
        self.invalidator.invalidate_skills(owner_id)
        return ServiceResult.success(created)

    async def update(self, skill_id: int, data: SkillWrite) -> ServiceResult[SkillRead]:
        if data.id is not None and data.id != skill_id:
            return validation_error("ID mismatch.")

        error = self._validate(data)
        if error:
            return validation_error(error)

        new_owner_id = data.portfolio_user_id
        name = data.name.strip()
        normalized_name = normalize_name(name)
        level = SkillLevel.parse(data.level).value

        missing = await self._owner_missing(new_owner_id)
        if missing:
            return missing

        skill = await self.skill_repo.get_by_id(skill_id)
        if skill is None:
            return not_found(f"Skill with ID {skill_id} not found.")

        if data.version is not None and data.version != skill.version:
            return conflict(f"Skill with ID {skill_id} was modified by another request.")

        if await self.skill_repo.find_by_owner_and_name(
            new_owner_id, normalized_name, exclude_id=skill_id
        ):
            return duplicate(f"The user already has another skill with the name '{name}'.")

        original_owner_id = skill.portfolio_user_id
        try:
            skill = await self.skill_repo.update(
                skill,
                portfolio_user_id=new_owner_id,
                name=name,
                normalized_name=normalized_name,
                level=level,
            )
        except StaleRecordError:
            return conflict(f"Skill with ID {skill_id} was modified or deleted by another request.")
        except IntegrityViolationError:
            return await self._owner_missing(new_owner_id) or duplicate(
                f"The user already has another skill with the name '{name}'."
            )

        updated = SkillRead.model_validate(skill)
        self.invalidator.invalidate_skills(original_owner_id, new_owner_id)
        return ServiceResult.success(updated)

    async def delete(self, skill_id: int) -> ServiceResult[None]:
        skill = await self.skill_repo.get_by_id(skill_id)
        if skill is None:
            return not_found(f"Skill with ID {skill_id} not found.")

        owner_id = skill.portfolio_user_id
        try:
            await self.skill_repo.delete(skill)
        except StaleRecordError:
            return conflict(f"Skill with ID {skill_id} was modified or deleted by another request.")

        self.invalidator.invalidate_skills(owner_id)
        return ServiceResult.success()
