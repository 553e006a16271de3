import asyncio

import pytest
from fastapi.testclient import TestClient

from app.database.connection import Database
from app.main import create_app
from app.system_services.create_patient import seed_patients
from config.appconfig import AppSettings
from scripts.seed_patients import run_seed


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings(tmp_path):
    return AppSettings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def client(test_settings):
    """TestClient over a freshly seeded SQLite file."""
    asyncio.run(run_seed(test_settings))
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def db_session(test_settings):
    """Session on a seeded database for service-level tests."""
    database = Database(test_settings.DATABASE_URL)
    await database.create_tables()
    async with database.session_factory() as session:
        await seed_patients(session)
        yield session
    await database.dispose()
