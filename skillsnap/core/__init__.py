from .cache import CachePolicy, MemoryCache
from .redis_client import create_redis_client
from .rate_limiter import (
    is_rate_limited,
    increment_rate_limit,
    clear_rate_limit,
    get_login_rate_key,
)
from .token_store import revoke_token, is_token_revoked

__all__ = [
    "CachePolicy",
    "MemoryCache",
    "create_redis_client",
    "is_rate_limited",
    "increment_rate_limit",
    "clear_rate_limit",
    "get_login_rate_key",
    "revoke_token",
    "is_token_revoked",
]
