from typing import Any, Awaitable, Callable, Optional, TypeVar

from ..config import settings
from ..contracts.cache import ICacheService
from ..core.cache import CachePolicy
from ..core.logger import logger

T = TypeVar("T")


class CacheKeys:
    ALL_PROJECTS = "all_projects"
    PROJECTS_STATISTICS = "projects_statistics"
    ALL_SKILLS = "all_skills"
    SKILLS_STATISTICS = "skills_statistics"

    @staticmethod
    def projects_for_owner(portfolio_user_id: int) -> str:
        return f"projects_user_{portfolio_user_id}"

    @staticmethod
    def skills_for_owner(portfolio_user_id: int) -> str:
        return f"skills_user_{portfolio_user_id}"


def listing_policy() -> CachePolicy:
    return CachePolicy(
        absolute_ttl=settings.LISTING_CACHE_ABSOLUTE_MINUTES * 60,
        sliding_ttl=settings.LISTING_CACHE_SLIDING_MINUTES * 60,
    )


def statistics_policy() -> CachePolicy:
    return CachePolicy(absolute_ttl=settings.STATISTICS_CACHE_MINUTES * 60)


async def read_through(
    cache: ICacheService,
    key: str,
    policy: CachePolicy,
    loader: Callable[[], Awaitable[Optional[T]]],
) -> Optional[T]:
    """Return the cached value for ``key`` or load, store and return it.

    A loader result of ``None`` means "not found" and is never stored.
    Cache failures are logged and the value is served straight from the
    loader instead.
    """
    try:
        cached = cache.get(key)
    except Exception as e:
        logger.error(f"Cache read failed for {key}: {e}")
        cached = None

    if cached is not None:
        logger.debug(f"Cache hit: {key}")
        return cached

    logger.debug(f"Cache miss: {key}")
    value = await loader()
    if value is None:
        return None

    try:
        cache.set(key, value, policy)
    except Exception as e:
        logger.error(f"Cache write failed for {key}: {e}")
    return value


class CacheInvalidator:
    """Evicts derived read models once a write has been committed.

    Eviction is best effort: a failure is logged and never reaches the
    caller, the stale entry is dropped by its TTL at the latest.
    """

    def __init__(self, cache: ICacheService):
        self.cache = cache

    def _remove(self, key: str) -> bool:
        try:
            self.cache.remove(key)
            return True
        except Exception as e:
            logger.error(f"Cache invalidation failed for {key}: {e}")
            return False

    def _remove_all(self, keys: list[str]) -> bool:
        results = [self._remove(key) for key in keys]
        return all(results)

    def invalidate_projects(self, *owner_ids: Optional[int]) -> bool:
        keys = [CacheKeys.projects_for_owner(owner_id) for owner_id in _unique(owner_ids)]
        keys += [CacheKeys.ALL_PROJECTS, CacheKeys.PROJECTS_STATISTICS]
        logger.info(f"Invalidating project caches: {', '.join(keys)}")
        return self._remove_all(keys)

    def invalidate_skills(self, *owner_ids: Optional[int]) -> bool:
        keys = [CacheKeys.skills_for_owner(owner_id) for owner_id in _unique(owner_ids)]
        keys += [CacheKeys.ALL_SKILLS, CacheKeys.SKILLS_STATISTICS]
        logger.info(f"Invalidating skill caches: {', '.join(keys)}")
        return self._remove_all(keys)

    def invalidate_owner(self, portfolio_user_id: int) -> bool:
        projects_ok = self.invalidate_projects(portfolio_user_id)
        skills_ok = self.invalidate_skills(portfolio_user_id)
        return projects_ok and skills_ok

    def invalidate_everything(self) -> bool:
        try:
            self.cache.clear()
            logger.info("Cache cleared")
            return True
        except Exception as e:
            logger.error(f"Cache clear failed: {e}")
            return False


def _unique(owner_ids: tuple[Any, ...]) -> list[int]:
    seen: list[int] = []
    for owner_id in owner_ids:
        if owner_id is not None and owner_id not in seen:
            seen.append(owner_id)
    return seen
