from typing import Optional, Sequence

from sqlalchemy import func, select

from .base import BaseRepository
from ..models.project import Project
from ...core.logger import logger


class ProjectRepository(BaseRepository):
    async def list_all(self) -> Sequence[Project]:
        result = await self.db.execute(select(Project).order_by(Project.id))
        return result.scalars().all()

    async def get_by_id(self, project_id: int) -> Optional[Project]:
        return await self.db.get(Project, project_id)

    async def list_by_owner(self, portfolio_user_id: int) -> Sequence[Project]:
        stmt = (
            select(Project)
            .where(Project.portfolio_user_id == portfolio_user_id)
            .order_by(Project.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def search(
        self,
        title: Optional[str] = None,
        portfolio_user_id: Optional[int] = None,
    ) -> Sequence[Project]:
        stmt = select(Project).order_by(Project.id)
        if title:
            stmt = stmt.where(func.lower(Project.title).contains(title.lower(), autoescape=True))
        if portfolio_user_id is not None:
            stmt = stmt.where(Project.portfolio_user_id == portfolio_user_id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create(
        self,
        portfolio_user_id: int,
        title: str,
        description: str,
        image_url: Optional[str] = None,
    ) -> Project:
        project = Project(
            portfolio_user_id=portfolio_user_id,
            title=title,
            description=description,
            image_url=image_url,
        )
        self.db.add(project)
        await self._commit()
        await self.db.refresh(project)
        logger.info(f"Project created: {project.id} (owner {portfolio_user_id})")
        return project

    async def update(
        self,
        project: Project,
        portfolio_user_id: int,
        title: str,
        description: str,
        image_url: Optional[str],
    ) -> Project:
        project.portfolio_user_id = portfolio_user_id
        project.title = title
        project.description = description
        project.image_url = image_url
        await self._commit()
        logger.info(f"Project updated: {project.id}")
        return project

    async def delete(self, project: Project) -> None:
        project_id = project.id
        await self.db.delete(project)
        await self._commit()
        logger.info(f"Project deleted: {project_id}")
