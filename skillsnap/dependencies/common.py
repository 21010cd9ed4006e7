import redis.asyncio as redis
from fastapi import Request

from ..contracts.cache import ICacheService


def get_cache(request: Request) -> ICacheService:
    return request.app.state.cache


def get_redis(request: Request) -> redis.Redis:
    return request.app.state.redis
