# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с пользователями.
"""

from .schemas import (BulkCreateResponse, EmptyResponse, ErrorResponse,
                      UserListResponse, UserResponse)
from .utils import (get_bulk_service, get_clock, get_lifecycle_service,
                    get_query_service, message_for_status, success_response)

__all__ = [
    # Схемы
    "UserResponse",
    "UserListResponse",
    "BulkCreateResponse",
    "EmptyResponse",
    "ErrorResponse",
    # Утилиты
    "success_response",
    "message_for_status",
    # Зависимости
    "get_clock",
    "get_query_service",
    "get_lifecycle_service",
    "get_bulk_service",
]
