# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/query.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Выборка списка пользователей: фильтр, сортировка и пагинация.
"""

import asyncio
from typing import List

from loguru import logger

from src.domain.enums import SortOrder, UserSortField
from src.domain.models import PUBLIC_FIELDS
from src.domain.schemas import PaginationMeta, UserPage, UserQuery, UserRead
from src.repository.base import SortSpec
from src.repository.users import UserStore

from .filters import build_user_filter
from .pagination import calculate_skip, calculate_total_pages


def build_sort(sort_by: UserSortField, sort_order: SortOrder) -> List[SortSpec]:
    """
    Ключи сортировки для выборки.

    Последним ключом всегда идет id по возрастанию: у SQL нет естественного
    порядка хранения, а страницы должны быть детерминированными.
    """
    sort: List[SortSpec] = [(sort_by.column, sort_order)]
    if sort_by.column != "id":
        sort.append(("id", SortOrder.ASC))
    return sort


class UserQueryService:
    """Сервис выборки пользователей."""

    def __init__(self, store: UserStore):
        self.store = store

    async def find_all(self, query: UserQuery) -> UserPage:
        """
        Получить страницу пользователей.

        Выборка страницы и подсчет общего количества независимы и
        выполняются конкурентно.

        Args:
            query: Проверенные параметры выборки

        Returns:
            Страница записей и метаданные пагинации

        Raises:
            InvalidFilterError: Если minAge > maxAge
            StoreUnavailableError: Если хранилище недоступно
        """
        predicate = build_user_filter(
            search=query.search,
            min_age=query.min_age,
            max_age=query.max_age,
            is_deleted=query.is_deleted,
        )
        sort = build_sort(query.sort_by, query.sort_order)
        pagination = calculate_skip(query.page, query.page_size)

        documents, total = await asyncio.gather(
            self.store.find_many(
                predicate,
                projection=PUBLIC_FIELDS,
                sort=sort,
                skip=pagination.skip,
                limit=pagination.limit,
            ),
            self.store.count(predicate),
        )

        meta = PaginationMeta(
            total=total,
            page=query.page,
            page_size=query.page_size,
            total_pages=calculate_total_pages(total, query.page_size),
        )
        logger.debug(
            f"Выборка пользователей: page={query.page}, page_size={query.page_size}, "
            f"найдено {len(documents)} из {total}"
        )
        return UserPage(
            data=[UserRead.model_validate(document) for document in documents],
            meta=meta,
        )
