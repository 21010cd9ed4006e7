from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.portfolio_user import PortfolioUser
from ..models.project import Project
from ..models.skill import Skill


class StatisticsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count_portfolio_users(self) -> int:
        result = await self.db.execute(select(func.count(PortfolioUser.id)))
        return result.scalar_one()

    async def count_projects(self) -> int:
        result = await self.db.execute(select(func.count(Project.id)))
        return result.scalar_one()

    async def count_skills(self) -> int:
        result = await self.db.execute(select(func.count(Skill.id)))
        return result.scalar_one()

    async def project_counts_by_owner(self) -> List[Tuple[int, int]]:
        stmt = (
            select(Project.portfolio_user_id, func.count(Project.id))
            .group_by(Project.portfolio_user_id)
            .order_by(Project.portfolio_user_id)
        )
        result = await self.db.execute(stmt)
        return [(owner_id, count) for owner_id, count in result.all()]

    async def skill_counts_by_owner(self) -> List[Tuple[int, int]]:
        stmt = (
            select(Skill.portfolio_user_id, func.count(Skill.id))
            .group_by(Skill.portfolio_user_id)
            .order_by(Skill.portfolio_user_id)
        )
        result = await self.db.execute(stmt)
        return [(owner_id, count) for owner_id, count in result.all()]

    async def skill_counts_by_level(self, portfolio_user_id: Optional[int] = None) -> List[Tuple[str, int]]:
        skill_count = func.count(Skill.id)
        stmt = select(Skill.level, skill_count).group_by(Skill.level)
        if portfolio_user_id is not None:
            stmt = stmt.where(Skill.portfolio_user_id == portfolio_user_id)
        stmt = stmt.order_by(skill_count.desc(), Skill.level)
        result = await self.db.execute(stmt)
        return [(level, count) for level, count in result.all()]

    async def most_popular_skills(self, limit: int = 10) -> List[Tuple[str, int]]:
        skill_count = func.count(Skill.id)
        normalized_name = Skill.normalized_name
        stmt = (
            select(func.min(Skill.name), skill_count)
            .group_by(normalized_name)
            .order_by(skill_count.desc(), normalized_name)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [(name, count) for name, count in result.all()]

    async def counts_for_owner(self, portfolio_user_id: int) -> Tuple[int, int]:
        project_count = await self.db.execute(
            select(func.count(Project.id)).where(Project.portfolio_user_id == portfolio_user_id)
        )
        skill_count = await self.db.execute(
            select(func.count(Skill.id)).where(Skill.portfolio_user_id == portfolio_user_id)
        )
        return project_count.scalar_one(), skill_count.scalar_one()
