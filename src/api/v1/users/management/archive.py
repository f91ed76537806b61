# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/management/archive.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Восстановление мягко удаленных пользователей.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.service.users import UserLifecycleService

from ..shared.schemas import UserResponse
from ..shared.utils import get_lifecycle_service, success_response

router = APIRouter(tags=["👤 Пользователи - 📦 Восстановление"])


@router.patch("/{user_id}/restore", response_model=UserResponse)
async def restore_user_endpoint(
    user_id: str,
    service: UserLifecycleService = Depends(get_lifecycle_service),
) -> dict:
    """
    Восстановить мягко удаленного пользователя.

    Args:
        user_id: ID пользователя
        service: Сервис жизненного цикла пользователей

    Returns:
        Восстановленный пользователь

    Raises:
        InvalidIdError: Если ID некорректен
        NotFoundError: Если удаленного пользователя с таким ID нет
    """
    try:
        logger.info(f"Восстановление пользователя ID: {user_id}")
        user = await service.restore(user_id)
        logger.info(f"Пользователь с ID {user_id} успешно восстановлен")
        return success_response(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка восстановления пользователя {user_id}: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to restore user",
        )
