# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/management/bulk.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Массовые операции для пользователей.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.service.users import UserBulkService

from ..shared.schemas import BulkCreateRequest, BulkCreateResponse
from ..shared.utils import get_bulk_service, success_response

router = APIRouter(tags=["👤 Пользователи - 📦 Массовые операции"])


@router.post(
    "/bulk", response_model=BulkCreateResponse, status_code=status.HTTP_201_CREATED
)
async def bulk_create_users_endpoint(
    payload: BulkCreateRequest,
    service: UserBulkService = Depends(get_bulk_service),
) -> dict:
    """
    Массово создать пользователей.

    Записи с уже существующим email пропускаются и возвращаются
    в списке ``skipped`` с причиной.

    Args:
        payload: Список пользователей для создания
        service: Сервис массовых операций

    Returns:
        Количество созданных и список пропущенных записей

    Raises:
        BulkInsertError: Если пакетная вставка была отклонена хранилищем
    """
    try:
        logger.info(f"Массовое создание {len(payload.users)} пользователей")
        result = await service.bulk_create(payload.users)
        logger.info(
            f"Массово создано {result.inserted_count} пользователей, "
            f"пропущено {len(result.skipped)}"
        )
        return success_response(result, status.HTTP_201_CREATED)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка массового создания пользователей: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to bulk create users",
        )
