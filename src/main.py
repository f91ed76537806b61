# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения UserRegistry.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error_handlers import register_error_handlers
from src.api.v1.users import router as users_router
from src.clients.database_client import (async_engine, check_db_connection,
                                         init_db)
from src.config.logger import configure_logger, get_system_logger
from src.config.settings import settings
from src.config.uvicorn_config import setup_uvicorn_logging

logger = configure_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Инициализация сервисов при старте и освобождение пула при остановке."""
    setup_uvicorn_logging()

    system_logger = get_system_logger()
    system_logger.info(f"🔧 Инициализация сервисов ({settings.get_config_source()})...")

    try:
        await check_db_connection()
        system_logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise

    await init_db()
    system_logger.info("🎉 User Registry API готов к работе")

    yield

    await async_engine.dispose()
    logger.info("🛑 Завершение работы User Registry API")


app = FastAPI(
    title="User Registry API",
    description="API для управления записями пользователей",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    openapi_tags=[
        {
            "name": "👤 Пользователи - ➕ Создание",
            "description": "Создание новых пользователей",
        },
        {
            "name": "👤 Пользователи - 📖 Чтение",
            "description": "Поиск, фильтрация и получение пользователей",
        },
        {
            "name": "👤 Пользователи - ✏️ Обновление",
            "description": "Частичное обновление пользователей",
        },
        {
            "name": "👤 Пользователи - 🗑️ Удаление",
            "description": "Мягкое удаление пользователей",
        },
        {
            "name": "👤 Пользователи - 📦 Восстановление",
            "description": "Восстановление мягко удаленных пользователей",
        },
        {
            "name": "👤 Пользователи - 📦 Массовые операции",
            "description": "Массовое создание пользователей с пропуском дубликатов",
        },
    ],
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception:
        if request.url.path.startswith("/api/"):
            logger.error(
                f"💥 Критическая ошибка API: {request.method} {request.url.path}"
            )
        raise

    if request.url.path.startswith("/api/"):
        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )
    return response


register_error_handlers(app)

app.include_router(users_router, prefix="/api/v1")


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {"message": "User Registry API работает", "version": app.version}


@app.get("/api/v1/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok"}
