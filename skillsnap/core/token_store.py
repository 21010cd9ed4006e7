import redis.asyncio as redis

from .logger import logger


def get_revoked_token_key(jti: str) -> str:
    return f"revoked_token:{jti}"


async def revoke_token(redis_client: redis.Redis, jti: str, ttl_seconds: int) -> bool:
    if ttl_seconds <= 0:
        return True
    try:
        await redis_client.setex(get_revoked_token_key(jti), ttl_seconds, "revoked")
        return True
    except Exception as e:
        logger.error(f"Redis error storing revoked token: {e}")
        return False


async def is_token_revoked(redis_client: redis.Redis, jti: str) -> bool:
    try:
        return bool(await redis_client.exists(get_revoked_token_key(jti)))
    except Exception as e:
        logger.error(f"Redis error checking revoked token: {e}")
        return False
