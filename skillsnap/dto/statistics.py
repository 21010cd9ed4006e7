from typing import List

from .base import ReadModel


class OwnerCount(ReadModel):
    portfolio_user_id: int
    count: int


class LevelCount(ReadModel):
    level: str
    count: int


class SkillPopularity(ReadModel):
    skill_name: str
    count: int


class ProjectStatistics(ReadModel):
    total_projects: int
    total_users: int
    average_projects_per_user: float
    projects_by_user: List[OwnerCount]


class SkillStatistics(ReadModel):
    total_skills: int
    total_users: int
    average_skills_per_user: float
    skills_by_level: List[LevelCount]
    most_popular_skills: List[SkillPopularity]
    skills_by_user: List[OwnerCount]


class PortfolioStatistics(ReadModel):
    total_portfolio_users: int
    total_projects: int
    total_skills: int


class PortfolioUserStatistics(ReadModel):
    portfolio_user_id: int
    name: str
    project_count: int
    skill_count: int
    skills_by_level: List[LevelCount]
