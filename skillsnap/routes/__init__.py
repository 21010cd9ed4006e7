from .auth import router as auth_router
from .portfolio_users import router as portfolio_users_router
from .projects import router as projects_router
from .skills import router as skills_router
from .seed import router as seed_router

__all__ = [
    "auth_router",
    "portfolio_users_router",
    "projects_router",
    "skills_router",
    "seed_router",
]
