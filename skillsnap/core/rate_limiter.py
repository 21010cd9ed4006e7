import redis.asyncio as redis

from .logger import logger


async def is_rate_limited(redis_client: redis.Redis, key: str, limit: int) -> bool:
    try:
        attempts = await redis_client.get(key)
        return bool(attempts) and int(attempts) >= limit
    except Exception as e:
        logger.error(f"Redis error in is_rate_limited: {e}")
        return False


async def increment_rate_limit(redis_client: redis.Redis, key: str, window_seconds: int):
    try:
        await redis_client.incr(key)
        await redis_client.expire(key, window_seconds)
    except Exception as e:
        logger.error(f"Redis error in increment_rate_limit: {e}")


async def clear_rate_limit(redis_client: redis.Redis, key: str):
    try:
        await redis_client.delete(key)
    except Exception as e:
        logger.error(f"Redis error in clear_rate_limit: {e}")


def get_login_rate_key(email: str) -> str:
    return f"login_attempts:{email}"
