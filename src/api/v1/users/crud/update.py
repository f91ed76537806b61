# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для обновления пользователей.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.service.users import UserLifecycleService

from ..shared.schemas import UserResponse, UserUpdate
from ..shared.utils import get_lifecycle_service, success_response

router = APIRouter(tags=["👤 Пользователи - ✏️ Обновление"])


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_endpoint(
    user_id: str,
    user_data: UserUpdate,
    service: UserLifecycleService = Depends(get_lifecycle_service),
) -> dict:
    """
    Частично обновить пользователя.

    Args:
        user_id: ID пользователя
        user_data: Обновляемые поля (только переданные)
        service: Сервис жизненного цикла пользователей

    Returns:
        Обновленные данные пользователя

    Raises:
        NotFoundError: Если активного пользователя нет
        DuplicateEmailError: Если новый email занят
    """
    try:
        logger.info(f"Обновление пользователя {user_id}: {sorted(user_data.to_patch())}")
        user = await service.update(user_id, user_data)
        return success_response(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления пользователя {user_id}: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user",
        )
