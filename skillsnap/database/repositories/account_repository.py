from typing import Optional

from sqlalchemy import select

from .base import BaseRepository
from .exceptions import IntegrityViolationError
from ..models.account import Account
from ...auth.security import get_password_hash, verify_account_password
from ...core.logger import logger


class AccountRepository(BaseRepository):
    async def get_by_id(self, account_id: int) -> Optional[Account]:
        return await self.db.get(Account, account_id)

    async def get_by_email(self, email: str) -> Optional[Account]:
        result = await self.db.execute(select(Account).where(Account.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def create(self, email: str, password: str, roles: str = "user") -> Account:
        account = Account(
            email=email,
            hashed_password=get_password_hash(password),
            roles=roles,
        )
        self.db.add(account)
        try:
            await self._commit()
        except IntegrityViolationError:
            logger.warning(f"Email already exists: {email}")
            raise
        await self.db.refresh(account)
        logger.info(f"Account created successfully: {email}")
        return account

    async def verify_credentials(self, email: str, password: str) -> Optional[Account]:
        account = await self.get_by_email(email)
        hashed_password = account.hashed_password if account else None
        if verify_account_password(password, hashed_password):
            return account
        return None
