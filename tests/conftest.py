# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

# Движок приложения создается при импорте src.clients.database_client
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./user_registry_test.db")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from src.api.v1.users.shared import get_clock
from src.clients.database_client import get_user_store
from src.core.clock import FixedClock
from src.domain.models import Base
from src.main import app
from src.repository.users import SqlAlchemyUserStore
from tests.fixtures import FIXED_NOW


@pytest.fixture
async def test_engine(tmp_path):
    """Создать тестовый движок БД (файл SQLite на тест)."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'users.db'}", echo=False
    )

    # Создаем таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Фабрика тестовых сессий БД."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def store(session_factory):
    """Хранилище пользователей поверх тестовой БД."""
    return SqlAlchemyUserStore(session_factory)


@pytest.fixture
def fixed_clock():
    """Часы с фиксированным временем."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
async def client(store, fixed_clock):
    """Создать асинхронный тестовый клиент для API."""
    app.dependency_overrides[get_user_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client
    app.dependency_overrides.clear()
