# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Импорты сервисов пользователей.
"""

from .bulk import UserBulkService
from .filters import build_user_filter
from .lifecycle import UserLifecycleService, parse_user_id
from .pagination import calculate_skip, calculate_total_pages
from .query import UserQueryService, build_sort

__all__ = [
    # Фильтры и пагинация
    "build_user_filter",
    "calculate_skip",
    "calculate_total_pages",
    "build_sort",
    # Выборка
    "UserQueryService",
    # Жизненный цикл
    "UserLifecycleService",
    "parse_user_id",
    # Массовые операции
    "UserBulkService",
]
