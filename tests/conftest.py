"""
Shared fixtures: on-disk SQLite settings, an initialised database and an
HTTP client running the full app lifespan.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from auth.jwt import TokenIssuer
from config.settings import Settings
from database.session import Database
from main import create_app

JWT_SECRET = "tests-secret-key"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tasks.sqlite3'}",
        jwt_secret=JWT_SECRET,
        jwt_expiry_seconds=3600,
        port=8000,
        bcrypt_rounds=4,
    )


@pytest.fixture
def issuer(settings) -> TokenIssuer:
    return TokenIssuer(settings.jwt_secret, settings.jwt_expiry_seconds)


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings.sqlalchemy_url)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
