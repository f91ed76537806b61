# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from src.config.logger import InterceptHandler
from src.config.settings import settings

_ROUTED_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
)


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn и SQLAlchemy."""

    # Очищаем существующие обработчики
    for logger_name in _ROUTED_LOGGERS:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers = [InterceptHandler()]
        logger_obj.propagate = False

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(
        logging.WARNING
    )  # Скрываем access логи
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    # SQL запросы пишем только при DB_ECHO=true
    sql_level = logging.INFO if settings.db_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def get_uvicorn_config():
    """Возвращает конфигурацию для uvicorn."""
    return {
        "app": "src.main:app",
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": settings.debug,
        "log_config": None,  # Отключаем стандартную конфигурацию логов
        "access_log": True,
        "use_colors": True,
    }


def run() -> None:
    """Запускает API сервер."""
    import uvicorn

    setup_uvicorn_logging()
    uvicorn.run(**get_uvicorn_config())
