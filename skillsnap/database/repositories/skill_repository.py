from typing import Optional, Sequence

from sqlalchemy import func, select

from .base import BaseRepository
from ..models.skill import Skill
from ...core.logger import logger


class SkillRepository(BaseRepository):
    async def list_all(self) -> Sequence[Skill]:
        result = await self.db.execute(select(Skill).order_by(Skill.id))
        return result.scalars().all()

    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        return await self.db.get(Skill, skill_id)

    async def list_by_owner(self, portfolio_user_id: int) -> Sequence[Skill]:
        stmt = (
            select(Skill)
            .where(Skill.portfolio_user_id == portfolio_user_id)
            .order_by(Skill.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_by_level(self, level: str) -> Sequence[Skill]:
        stmt = (
            select(Skill)
            .where(func.lower(Skill.level) == level.lower())
            .order_by(Skill.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def search(
        self,
        name: Optional[str] = None,
        level: Optional[str] = None,
        portfolio_user_id: Optional[int] = None,
    ) -> Sequence[Skill]:
        stmt = select(Skill).order_by(Skill.id)
        if name:
            fragment = name.strip().casefold()
            stmt = stmt.where(Skill.normalized_name.contains(fragment, autoescape=True))
        if level:
            stmt = stmt.where(func.lower(Skill.level) == level.lower())
        if portfolio_user_id is not None:
            stmt = stmt.where(Skill.portfolio_user_id == portfolio_user_id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def find_by_owner_and_name(
        self,
        portfolio_user_id: int,
        normalized_name: str,
        exclude_id: Optional[int] = None,
    ) -> Optional[Skill]:
        stmt = select(Skill).where(
            Skill.portfolio_user_id == portfolio_user_id,
            Skill.normalized_name == normalized_name,
        )
        if exclude_id is not None:
            stmt = stmt.where(Skill.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def create(
        self, portfolio_user_id: int, name: str, normalized_name: str, level: str
    ) -> Skill:
        skill = Skill(
            portfolio_user_id=portfolio_user_id,
            name=name,
            normalized_name=normalized_name,
            level=level,
        )
        self.db.add(skill)
        await self._commit()
        await self.db.refresh(skill)
        logger.info(f"Skill created: {skill.id} (owner {portfolio_user_id})")
        return skill

    async def update(
        self,
        skill: Skill,
        portfolio_user_id: int,
        name: str,
        normalized_name: str,
        level: str,
    ) -> Skill:
        skill.portfolio_user_id = portfolio_user_id
        skill.name = name
        skill.normalized_name = normalized_name
        skill.level = level
        await self._commit()
        logger.info(f"Skill updated: {skill.id}")
        return skill

    async def delete(self, skill: Skill) -> None:
        skill_id = skill.id
        await self.db.delete(skill)
        await self._commit()
        logger.info(f"Skill deleted: {skill_id}")
