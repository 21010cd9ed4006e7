from typing import List, Tuple

from ..database.repositories.statistics_repository import StatisticsRepository
from ..dto.statistics import (
    LevelCount,
    OwnerCount,
    PortfolioStatistics,
    PortfolioUserStatistics,
    ProjectStatistics,
    SkillPopularity,
    SkillStatistics,
)


def _average(owner_counts: List[Tuple[int, int]]) -> float:
    if not owner_counts:
        return 0.0
    return round(sum(count for _, count in owner_counts) / len(owner_counts), 2)


class StatisticsService:
    """Aggregates counts from the current store contents.

    Every call recomputes from scratch; caching is the caller's concern.
    """

    def __init__(self, statistics_repo: StatisticsRepository):
        self.statistics_repo = statistics_repo

    async def project_statistics(self) -> ProjectStatistics:
        by_owner = await self.statistics_repo.project_counts_by_owner()
        return ProjectStatistics(
            total_projects=sum(count for _, count in by_owner),
            total_users=len(by_owner),
            average_projects_per_user=_average(by_owner),
            projects_by_user=[
                OwnerCount(portfolio_user_id=owner_id, count=count)
                for owner_id, count in by_owner
            ],
        )

    async def skill_statistics(self) -> SkillStatistics:
        by_owner = await self.statistics_repo.skill_counts_by_owner()
        by_level = await self.statistics_repo.skill_counts_by_level()
        popular = await self.statistics_repo.most_popular_skills(limit=10)
        return SkillStatistics(
            total_skills=sum(count for _, count in by_owner),
            total_users=len(by_owner),
            average_skills_per_user=_average(by_owner),
            skills_by_level=[LevelCount(level=level, count=count) for level, count in by_level],
            most_popular_skills=[
                SkillPopularity(skill_name=name, count=count) for name, count in popular
            ],
            skills_by_user=[
                OwnerCount(portfolio_user_id=owner_id, count=count)
                for owner_id, count in by_owner
            ],
        )

    async def portfolio_statistics(self) -> PortfolioStatistics:
        return PortfolioStatistics(
            total_portfolio_users=await self.statistics_repo.count_portfolio_users(),
            total_projects=await self.statistics_repo.count_projects(),
            total_skills=await self.statistics_repo.count_skills(),
        )

    async def portfolio_user_statistics(
        self, portfolio_user_id: int, name: str
    ) -> PortfolioUserStatistics:
        project_count, skill_count = await self.statistics_repo.counts_for_owner(portfolio_user_id)
        by_level = await self.statistics_repo.skill_counts_by_level(portfolio_user_id)
        return PortfolioUserStatistics(
            portfolio_user_id=portfolio_user_id,
            name=name,
            project_count=project_count,
            skill_count=skill_count,
            skills_by_level=[LevelCount(level=level, count=count) for level, count in by_level],
        )
