# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Схемы Pydantic для ответов API пользователей.

Все успешные ответы оборачиваются в конверт
``{success, message, data[, meta]}``.
"""

from typing import Generic, List, Optional, TypeVar

from src.domain.schemas import (BulkCreateRequest, BulkCreateResult,
                                CamelModel, PaginationMeta, UserCreate,
                                UserRead, UserUpdate)

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Конверт успешного ответа."""

    success: bool = True
    message: str
    data: Optional[T] = None


class PaginatedResponse(ApiResponse[List[T]], Generic[T]):
    """Конверт ответа со списком и метаданными пагинации."""

    meta: PaginationMeta


class ErrorResponse(CamelModel):
    """Тело ответа об ошибке."""

    success: bool = False
    message: str
    status_code: int
    error_code: str
    timestamp: str
    field: Optional[str] = None


# Ответы об ошибках для документации OpenAPI
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Ошибка валидации или фильтра"},
    404: {"model": ErrorResponse, "description": "Пользователь не найден"},
    409: {"model": ErrorResponse, "description": "Конфликт уникальности или состояния"},
    500: {"model": ErrorResponse, "description": "Внутренняя ошибка сервера"},
    503: {"model": ErrorResponse, "description": "Хранилище недоступно"},
}

UserResponse = ApiResponse[UserRead]
UserListResponse = PaginatedResponse[UserRead]
BulkCreateResponse = ApiResponse[BulkCreateResult]
EmptyResponse = ApiResponse[None]

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserRead",
    "BulkCreateRequest",
    "BulkCreateResult",
    "ApiResponse",
    "PaginatedResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
    "UserResponse",
    "UserListResponse",
    "BulkCreateResponse",
    "EmptyResponse",
]
