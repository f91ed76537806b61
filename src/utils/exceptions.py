# -*- coding: utf-8 -*-
"""
Этот модуль определяет пользовательские исключения для API UserRegistry.
Сервисы выбрасывают эти исключения, а обработчики ошибок FastAPI превращают
их в HTTP ответы с соответствующими статус-кодами и сообщениями.
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_ID = "INVALID_ID"
    INVALID_FILTER = "INVALID_FILTER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    BULK_INSERT_FAILED = "BULK_INSERT_FAILED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIException(HTTPException):
    """Базовый класс для пользовательских исключений API."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str,
        headers: dict | None = None,
    ):
        """
        Инициализирует APIException с кодом статуса, деталями и кодом ошибки.

        Args:
            status_code (int): HTTP код статуса.
            detail (str): Сообщение об ошибке.
            error_code (str): Уникальный код ошибки.
            headers (dict, optional): Дополнительные заголовки.
        """
        super().__init__(status_code=status_code, headers=headers)
        self.detail = detail
        self.error_code = error_code

    def __str__(self) -> str:
        return self.detail


class InvalidIdError(APIException):
    """Вызывается, когда идентификатор записи синтаксически некорректен."""

    def __init__(self, resource_id: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid user ID: {resource_id!r}",
            error_code=ErrorCode.INVALID_ID,
        )
        self.resource_id = resource_id


class NotFoundError(APIException):
    """Вызывается, когда ресурс не найден."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str | int = None,
        details: str | None = None,
    ):
        """
        Инициализирует NotFoundError.

        Args:
            resource_type (str): Тип ресурса (например, "User", "Deleted user").
            resource_id (str or int, optional): ID ресурса.
            details (str, optional): Дополнительные детали об ошибке.
        """
        detail = f"{resource_type} not found"
        if resource_id:
            detail = f"{resource_type} with ID {resource_id} not found"
        if details:
            detail = f"{detail}: {details}"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=ErrorCode.NOT_FOUND,
        )


class ConflictError(APIException):
    """Вызывается, когда ресурс уже существует или возникает конфликт."""

    def __init__(self, detail: str):
        """
        Инициализирует ConflictError.

        Args:
            detail (str): Детальное сообщение об ошибке.
        """
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=ErrorCode.CONFLICT,
        )


class DuplicateEmailError(ConflictError):
    """Вызывается при нарушении уникальности email (в любом статусе удаления)."""

    def __init__(self, email: str | None = None, field: str = "email"):
        detail = f"{field} already exists"
        if email:
            detail = f"{field} {email!r} already exists"
        super().__init__(detail)
        self.email = email
        self.field = field


class InvalidFilterError(APIException):
    """Вызывается, когда параметры фильтра противоречат друг другу."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=ErrorCode.INVALID_FILTER,
        )


class StoreUnavailableError(APIException):
    """Вызывается, когда хранилище недоступно или операция с ним не удалась."""

    def __init__(self, detail: str = "Record store is unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code=ErrorCode.STORE_UNAVAILABLE,
        )


class BulkInsertError(APIException):
    """
    Вызывается, когда пакетная вставка отклонена хранилищем.

    Состояние частичной вставки зависит от хранилища (best-effort,
    без транзакционных гарантий).
    """

    def __init__(self, detail: str, attempted: int = 0):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=ErrorCode.BULK_INSERT_FAILED,
        )
        self.attempted = attempted


class DuplicateKeyError(Exception):
    """
    Нарушение уникального индекса на уровне хранилища.

    Не является HTTP исключением: сервисы переводят его в
    DuplicateEmailError или BulkInsertError.
    """

    def __init__(self, field: str | None = None, message: str = ""):
        super().__init__(message or f"duplicate key on {field or 'unknown field'}")
        self.field = field
