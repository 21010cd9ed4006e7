from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from .base import BaseRepository
from ..models.portfolio_user import PortfolioUser
from ...core.logger import logger


class PortfolioUserRepository(BaseRepository):
    def _select_with_children(self):
        return select(PortfolioUser).options(
            selectinload(PortfolioUser.projects),
            selectinload(PortfolioUser.skills),
        )

    async def list_all(self) -> Sequence[PortfolioUser]:
        stmt = self._select_with_children().order_by(PortfolioUser.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, portfolio_user_id: int) -> Optional[PortfolioUser]:
        stmt = (
            self._select_with_children()
            .where(PortfolioUser.id == portfolio_user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, portfolio_user_id: int) -> bool:
        stmt = select(PortfolioUser.id).where(PortfolioUser.id == portfolio_user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def search_by_name(self, name: Optional[str]) -> Sequence[PortfolioUser]:
        stmt = self._select_with_children().order_by(PortfolioUser.id)
        if name:
            stmt = stmt.where(
                func.lower(PortfolioUser.name).contains(name.lower(), autoescape=True)
            )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(PortfolioUser.id)))
        return result.scalar_one()

    async def create(
        self,
        name: str,
        bio: str,
        profile_image_url: Optional[str] = None,
        account_id: Optional[int] = None,
    ) -> PortfolioUser:
        portfolio_user = PortfolioUser(
            name=name,
            bio=bio,
            profile_image_url=profile_image_url,
            account_id=account_id,
        )
        self.db.add(portfolio_user)
        await self._commit()
        await self.db.refresh(portfolio_user)
        logger.info(f"Portfolio user created: {portfolio_user.id}")
        return portfolio_user

    async def update(
        self,
        portfolio_user: PortfolioUser,
        name: str,
        bio: str,
        profile_image_url: Optional[str],
    ) -> PortfolioUser:
        portfolio_user.name = name
        portfolio_user.bio = bio
        portfolio_user.profile_image_url = profile_image_url
        await self._commit()
        logger.info(f"Portfolio user updated: {portfolio_user.id}")
        return portfolio_user

    async def delete(self, portfolio_user: PortfolioUser) -> None:
        portfolio_user_id = portfolio_user.id
        await self.db.delete(portfolio_user)
        await self._commit()
        logger.info(f"Portfolio user deleted: {portfolio_user_id}")

    async def add_with_children(self, portfolio_users: List[PortfolioUser]) -> None:
        self.db.add_all(portfolio_users)
        await self._commit()
