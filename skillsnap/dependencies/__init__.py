from .auth_dependencies import (
    get_account_repository,
    get_auth_service,
    get_current_account,
    get_current_claims,
    require_account,
    require_role,
)
from .common import get_cache, get_redis
from .portfolio_dependencies import (
    get_portfolio_user_service,
    get_project_service,
    get_seed_service,
    get_skill_service,
    get_statistics_service,
)

__all__ = [
    "get_account_repository",
    "get_auth_service",
    "get_current_account",
    "get_current_claims",
    "require_account",
    "require_role",
    "get_cache",
    "get_redis",
    "get_portfolio_user_service",
    "get_project_service",
    "get_seed_service",
    "get_skill_service",
    "get_statistics_service",
]
