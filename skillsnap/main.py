from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .core.cache import MemoryCache
from .core.logger import logger
from .core.redis_client import create_redis_client
from .database import create_engine, create_session_factory, create_tables
from .routes import (
    auth_router,
    portfolio_users_router,
    projects_router,
    seed_router,
    skills_router,
)
from .utils import register_exception_handlers


def create_app(database_url: Optional[str] = None, redis_url: Optional[str] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(database_url or settings.DATABASE_URL)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.cache = MemoryCache(maxsize=settings.CACHE_MAX_ENTRIES)
        app.state.redis = create_redis_client(redis_url or settings.REDIS_URL)
        await create_tables(engine)
        logger.info("Application started successfully")
        yield
        logger.info("Application shutting down")
        app.state.cache.clear()
        await app.state.redis.aclose()
        await engine.dispose()

    app = FastAPI(title="SkillSnap API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(portfolio_users_router)
    app.include_router(projects_router)
    app.include_router(skills_router)
    app.include_router(seed_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
