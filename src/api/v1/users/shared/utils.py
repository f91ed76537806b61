# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/shared/utils.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Вспомогательные функции и зависимости для роутов пользователей.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, status

from src.clients.database_client import get_user_store
from src.core.clock import Clock, SystemClock
from src.domain.schemas import PaginationMeta
from src.repository.users import UserStore
from src.service.users import (UserBulkService, UserLifecycleService,
                               UserQueryService)

_STATUS_MESSAGES = {
    status.HTTP_200_OK: "Success",
    status.HTTP_201_CREATED: "Created successfully",
    status.HTTP_204_NO_CONTENT: "Updated successfully",
}


def message_for_status(status_code: int) -> str:
    """Текст сообщения конверта по HTTP статусу."""
    return _STATUS_MESSAGES.get(status_code, "Operation completed")


def success_response(
    data: Any,
    status_code: int = status.HTTP_200_OK,
    meta: Optional[PaginationMeta] = None,
) -> Dict[str, Any]:
    """
    Обернуть данные в конверт успешного ответа.

    Args:
        data: Полезная нагрузка
        status_code: HTTP статус ответа
        meta: Метаданные пагинации (только для списков)

    Returns:
        Словарь ``{success, message, data[, meta]}``
    """
    body: Dict[str, Any] = {
        "success": True,
        "message": message_for_status(status_code),
        "data": data,
    }
    if meta is not None:
        body["meta"] = meta
    return body


def get_clock() -> Clock:
    """Часы для сервисов (переопределяются в тестах)."""
    return SystemClock()


def get_query_service(store: UserStore = Depends(get_user_store)) -> UserQueryService:
    return UserQueryService(store)


def get_lifecycle_service(
    store: UserStore = Depends(get_user_store),
    clock: Clock = Depends(get_clock),
) -> UserLifecycleService:
    return UserLifecycleService(store, clock=clock)


def get_bulk_service(store: UserStore = Depends(get_user_store)) -> UserBulkService:
    return UserBulkService(store)
