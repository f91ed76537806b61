# -*- coding: utf-8 -*-
"""
UserRegistry/src/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла, предоставляя централизованную
систему управления настройками для всех окружений.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

"""Загрузка .env производится ТОЛЬКО если файл существует.
В контейнере используем переменные окружения, переданные Docker/Compose.
"""
# Корень проекта (UserRegistry/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ROOT_ENV_PATH = (BASE_DIR / ".env").resolve()


def _split_csv(value: str) -> list[str]:
    """Разбить строку "a, b,c" в список; "*" остается единственным элементом."""
    if value.strip() == "*":
        return ["*"]
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла."""

    model_config = SettingsConfigDict(
        env_file=ROOT_ENV_PATH if ROOT_ENV_PATH.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str | None = None
    postgres_db: str = "users"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    db_echo: bool = False
    db_pool_recycle: int = 3600

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # Конфигурация логирования
    log_level: str = "INFO"
    log_file: str | None = None
    debug: bool = False

    # Конфигурация CORS
    cors_allow_origins: str = ""
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "GET,POST,PATCH,DELETE,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    def get_allowed_origins(self) -> list[str]:
        """Разрешённые origins для CORS (пусто: любые)."""
        return _split_csv(self.cors_allow_origins) or ["*"]

    def get_cors_methods(self) -> list[str]:
        """Разрешённые HTTP методы для CORS."""
        return _split_csv(self.cors_allow_methods)

    def get_cors_headers(self) -> list[str]:
        """Разрешённые заголовки для CORS."""
        return _split_csv(self.cors_allow_headers)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Собираем URL базы данных из компонентов, если он не задан напрямую
        if not self.database_url:
            self.database_url = self._build_database_url()

    def _build_database_url(self) -> str:
        """URL asyncpg из отдельных параметров POSTGRES_*."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ROOT_ENV_PATH.exists():
            return f"root: {ROOT_ENV_PATH}"
        return "environment variables only"


settings = Settings()
