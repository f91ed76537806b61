# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для создания пользователей.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.service.users import UserLifecycleService

from ..shared.schemas import UserCreate, UserResponse
from ..shared.utils import get_lifecycle_service, success_response

router = APIRouter(tags=["👤 Пользователи - ➕ Создание"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(
    user_data: UserCreate,
    service: UserLifecycleService = Depends(get_lifecycle_service),
) -> dict:
    """
    Создать нового пользователя.

    Args:
        user_data: Данные нового пользователя
        service: Сервис жизненного цикла пользователей

    Returns:
        Данные созданного пользователя в конверте ответа

    Raises:
        DuplicateEmailError: Если email уже существует
    """
    try:
        logger.info(f"Создание пользователя: {user_data.email}")
        user = await service.create(user_data)
        return success_response(user, status.HTTP_201_CREATED)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Критическая ошибка создания пользователя {user_data.email}: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )
