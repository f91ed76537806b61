# -*- coding: utf-8 -*-
"""
UserRegistry/src/config/logger.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Логирование через loguru.

Стандартный logging перехватывается и перенаправляется в loguru.
Сообщения с ``extra["system"]`` выводятся отдельным форматом без путей
к файлам (баннеры старта/остановки).
"""

import logging
import sys
from typing import Optional

from loguru import logger

from src.config.settings import settings

# Шумные библиотеки, чьи логи не нужны в выводе сервиса
_MUTED_PREFIXES = ("httpx", "httpcore")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SYSTEM_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>SYSTEM</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # INFO от uvicorn (Started server, Will watch...) дублирует баннер
        if record.name.startswith("uvicorn") and record.levelno == logging.INFO:
            return
        if record.name.startswith(_MUTED_PREFIXES):
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Поднимаемся до кадра, вызвавшего logging
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _is_system(record) -> bool:
    return record["extra"].get("system") is True


def setup_logging(
    level: str = "INFO", debug: bool = False, log_file: Optional[str] = None
) -> None:
    """
    Настроить sinks loguru и перехват стандартного logging.

    Args:
        level: Минимальный уровень для консоли
        debug: Показывать DEBUG сообщения
        log_file: Путь к файлу логов (ротация 10 MB, хранение 14 дней)
    """
    logger.remove()

    def console_filter(record) -> bool:
        if _is_system(record):
            return False
        return debug or record["level"].name != "DEBUG"

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=level.upper(),
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=console_filter,
    )
    logger.add(
        sys.stdout,
        format=SYSTEM_FORMAT,
        level=level.upper(),
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=_is_system,
    )
    if log_file:
        logger.add(
            log_file,
            level="INFO",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="14 days",
            encoding="utf-8",
            filter=lambda record: not _is_system(record),
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


setup_logging(settings.log_level, settings.debug, settings.log_file)


def configure_logger(name: str = "user_registry"):
    """
    Возвращает настроенный логгер.

    Args:
        name: Имя логгера (в loguru не используется)
    """
    return logger


def get_system_logger():
    """Логгер для системных сообщений без файловых путей."""
    return logger.bind(system=True)
