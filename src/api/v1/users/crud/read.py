# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для чтения пользователей.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from src.domain.enums import SortOrder, UserSortField
from src.domain.schemas import (DEFAULT_PAGE_SIZE, MAX_AGE, MAX_PAGE_SIZE,
                                MIN_AGE, UserQuery)
from src.service.users import UserLifecycleService, UserQueryService

from ..shared.schemas import UserListResponse, UserResponse
from ..shared.utils import (get_lifecycle_service, get_query_service,
                            success_response)

router = APIRouter(tags=["👤 Пользователи - 📖 Чтение"])


@router.get("", response_model=UserListResponse)
async def list_users_endpoint(
    search: Optional[str] = Query(
        None, description="Поиск по имени или email (без учета регистра)"
    ),
    min_age: Optional[int] = Query(
        None, alias="minAge", ge=MIN_AGE, le=MAX_AGE, description="Минимальный возраст"
    ),
    max_age: Optional[int] = Query(
        None, alias="maxAge", ge=MIN_AGE, le=MAX_AGE, description="Максимальный возраст"
    ),
    is_deleted: bool = Query(
        False, alias="isDeleted", description="Фильтр по статусу удаления"
    ),
    page: int = Query(1, ge=1, description="Номер страницы"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        alias="pageSize",
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Количество записей на странице",
    ),
    sort_by: UserSortField = Query(
        UserSortField.CREATED_AT, alias="sortBy", description="Поле сортировки"
    ),
    sort_order: SortOrder = Query(
        SortOrder.DESC, alias="sortOrder", description="Направление сортировки"
    ),
    service: UserQueryService = Depends(get_query_service),
) -> dict:
    """
    Получить список пользователей с фильтрацией, пагинацией и сортировкой.

    Returns:
        Страница пользователей и метаданные пагинации

    Raises:
        InvalidFilterError: Если minAge > maxAge
    """
    try:
        query = UserQuery(
            search=search,
            min_age=min_age,
            max_age=max_age,
            is_deleted=is_deleted,
            page=page,
            page_size=page_size,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        logger.info(
            f"Запрос списка пользователей: search={search}, minAge={min_age}, "
            f"maxAge={max_age}, isDeleted={is_deleted}, page={page}, pageSize={page_size}"
        )
        result = await service.find_all(query)
        logger.info(f"Найдено пользователей: {result.meta.total}")
        return success_response(result.data, meta=result.meta)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения списка пользователей: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users",
        )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(
    user_id: str,
    service: UserLifecycleService = Depends(get_lifecycle_service),
) -> dict:
    """
    Получить активного пользователя по ID.

    Args:
        user_id: ID пользователя
        service: Сервис жизненного цикла пользователей

    Raises:
        InvalidIdError: Если ID некорректен
        NotFoundError: Если пользователь не найден или удален
    """
    try:
        logger.info(f"Запрос пользователя по ID: {user_id}")
        user = await service.find_one(user_id)
        return success_response(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения пользователя {user_id}: {e}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get user",
        )
