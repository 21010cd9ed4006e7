"""
Pytest configuration for the SkillSnap API tests.

Environment variables are set before the application package is imported,
every test gets its own SQLite database file and its own cache instance.
"""
import os
import sys
from pathlib import Path

os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["DEBUG"] = "true"

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from skillsnap.config import settings
from skillsnap.core.cache import MemoryCache
from skillsnap.database import create_engine, create_session_factory, create_tables
from skillsnap.database.repositories import (
    PortfolioUserRepository,
    ProjectRepository,
    SkillRepository,
    StatisticsRepository,
)
from skillsnap.dependencies import get_redis
from skillsnap.dto.portfolio_user import PortfolioUserWrite
from skillsnap.main import create_app
from skillsnap.services import (
    PortfolioUserService,
    ProjectService,
    SkillService,
    StatisticsService,
)


class FakeRedis:
    """Dictionary-backed stand-in for the handful of Redis commands the app uses."""

    def __init__(self):
        self.store = {}
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def incr(self, key):
        self.store[key] = str(int(self.store.get(key, 0)) + 1)
        return int(self.store[key])

    async def expire(self, key, seconds):
        self.ttls[key] = seconds
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            removed += 1 if self.store.pop(key, None) is not None else 0
            self.ttls.pop(key, None)
        return removed

    async def setex(self, key, seconds, value):
        self.store[key] = value
        self.ttls[key] = seconds
        return True

    async def exists(self, *keys):
        return sum(1 for key in keys if key in self.store)

    async def aclose(self):
        return None


# =============================================================================
# Store and cache fixtures
# =============================================================================

@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'skillsnap_test.db'}"


@pytest_asyncio.fixture
async def engine(database_url):
    engine = create_engine(database_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def cache():
    return MemoryCache(maxsize=128)


@pytest.fixture
def fake_redis():
    return FakeRedis()


# =============================================================================
# Service fixtures
# =============================================================================

@pytest.fixture
def statistics_service(db_session):
    return StatisticsService(StatisticsRepository(db_session))


@pytest.fixture
def portfolio_user_service(db_session, statistics_service, cache):
    return PortfolioUserService(PortfolioUserRepository(db_session), statistics_service, cache)


@pytest.fixture
def project_service(db_session, statistics_service, cache):
    return ProjectService(
        ProjectRepository(db_session),
        PortfolioUserRepository(db_session),
        statistics_service,
        cache,
    )


@pytest.fixture
def skill_service(db_session, statistics_service, cache):
    return SkillService(
        SkillRepository(db_session),
        PortfolioUserRepository(db_session),
        statistics_service,
        cache,
    )


@pytest_asyncio.fixture
async def owner(portfolio_user_service):
    result = await portfolio_user_service.create(PortfolioUserWrite(name="Alex", bio="dev"))
    return result.value


# =============================================================================
# HTTP fixtures
# =============================================================================

@pytest.fixture
def client(database_url, fake_redis):
    app = create_app(database_url=database_url)
    app.dependency_overrides[get_redis] = lambda: fake_redis
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/auth/register",
        json={"email": "owner@example.com", "password": "Sup3rSecret"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAILS", ["admin@example.com"])
    response = client.post(
        "/auth/register",
        json={"email": "Admin@Example.com", "password": "Sup3rSecret"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
