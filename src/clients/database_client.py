# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных.
"""
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from src.config.settings import settings
from src.domain.models import Base
from src.repository.users import SqlAlchemyUserStore

# Создаем асинхронный движок для подключения к базе данных
async_engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_pre_ping=True,  # Проверяем соединение перед использованием
    pool_recycle=settings.db_pool_recycle,
)

# Создаем фабрику асинхронных сессий
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


def get_user_store() -> SqlAlchemyUserStore:
    """
    Предоставляет хранилище пользователей для внедрения зависимостей в FastAPI.

    Хранилище само открывает сессию на каждый вызов, поэтому зависимость
    отдает не сессию, а фабрику, обернутую в адаптер.

    Returns:
        SqlAlchemyUserStore: Хранилище поверх общей фабрики сессий
    """
    return SqlAlchemyUserStore(AsyncSessionLocal)


async def init_db() -> None:
    """
    Инициализирует базу данных, создавая все определенные таблицы.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
        OperationalError: Ошибки подключения к базе данных
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_connection() -> None:
    """Проверяет доступность базы данных (SELECT 1)."""
    async with async_engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
