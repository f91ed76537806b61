# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций с пользователями.
Объединяет маршруты для CRUD операций и управления пользователями.
"""

from fastapi import APIRouter

from .crud import create_router, delete_router, read_router, update_router
from .management import archive_router, bulk_router
from .shared.schemas import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)

# Массовые операции регистрируются до маршрутов с {user_id}
router.include_router(bulk_router, prefix="/users")

# Добавление маршрутов CRUD операций
router.include_router(create_router, prefix="/users")
router.include_router(read_router, prefix="/users")
router.include_router(update_router, prefix="/users")
router.include_router(delete_router, prefix="/users")

# Добавление маршрутов управления
router.include_router(archive_router, prefix="/users")
