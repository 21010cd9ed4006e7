from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from .exceptions import IntegrityViolationError, StaleRecordError
from ...core.logger import logger


class BaseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self):
        try:
            await self.db.commit()
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(f"Concurrent modification detected: {e}")
            raise StaleRecordError(str(e)) from e
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Integrity constraint violated: {e.orig}")
            raise IntegrityViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error committing transaction: {e}")
            raise
