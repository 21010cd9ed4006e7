import redis.asyncio as redis

from .logger import logger


def create_redis_client(url: str) -> redis.Redis:
    client = redis.from_url(url, decode_responses=True, socket_connect_timeout=1)
    logger.info(f"Redis client configured: {url}")
    return client
