"""Shared fixtures: a fresh file-backed SQLite database per test.

A file (not ``:memory:``) so that concurrent sessions see one database.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from starledger.core.config import AdminSettings, DatabaseSettings, Settings
from starledger.infrastructure.database import build_engine, build_session_factory, init_db
from starledger.main import create_app

BOT_TOKEN = "bot-token-for-tests"
ADMIN_PASSWORD = "admin-password-for-tests"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'starledger.db'}"),
        admin=AdminSettings(bot_token=SecretStr(BOT_TOKEN), password=SecretStr(ADMIN_PASSWORD)),
    )


@pytest.fixture
async def test_engine(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(test_engine):
    return build_session_factory(test_engine)


@pytest.fixture
async def test_db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(settings, test_engine):
    """API client over the app built from the same settings (tables already created)."""
    app = create_app(settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    await app.state.container.dispose()
