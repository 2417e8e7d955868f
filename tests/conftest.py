"""
Общая конфигурация тестов.

БД: файл SQLite во временной папке (sqlite+aiosqlite), схема пересоздаётся
на каждый тест через синхронный движок. Логи пишутся туда же.
"""
import os
import sys
import tempfile
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

_tmp_dir = Path(tempfile.mkdtemp(prefix="projects_api_tests_"))
TEST_DB_PATH = _tmp_dir / "test.db"

# до импорта projects_api: Settings читает окружение при импорте модулей
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH.as_posix()}"
os.environ.setdefault("LOG_DIR", str(_tmp_dir / "logs"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from projects_api.db.base import Base


@pytest.fixture
def db_engine():
    """Чистая схема + async-движок без пула (соединение на каждую сессию)."""
    sync_engine = create_engine(f"sqlite:///{TEST_DB_PATH.as_posix()}")
    Base.metadata.drop_all(sync_engine)
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    yield create_async_engine(os.environ["DATABASE_URL"], poolclass=NullPool)


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    """TestClient приложения с подменённой зависимостью сессии БД."""
    from projects_api.api.main import app
    from projects_api.db.session import get_async_db

    async def _override_get_async_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = _override_get_async_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
