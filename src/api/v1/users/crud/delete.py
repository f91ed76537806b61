# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/crud/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Мягкое удаление пользователей.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.service.users import UserLifecycleService

from ..shared.schemas import EmptyResponse
from ..shared.utils import get_lifecycle_service, success_response

router = APIRouter(tags=["👤 Пользователи - 🗑️ Удаление"])


@router.delete("/{user_id}", response_model=EmptyResponse)
async def delete_user_endpoint(
    user_id: str,
    service: UserLifecycleService = Depends(get_lifecycle_service),
) -> dict:
    """
    Мягко удалить пользователя.

    Запись остается в хранилище (и продолжает резервировать свой email),
    но исключается из выборок по умолчанию.

    Raises:
        InvalidIdError: Если ID некорректен
        NotFoundError: Если активного пользователя нет
    """
    try:
        logger.info(f"Удаление пользователя ID: {user_id}")
        await service.remove(user_id)
        return success_response(None)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления пользователя {user_id}: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        )
