# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/filters.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Построение фильтра списка пользователей.
"""

from typing import Optional

from src.domain.predicates import Predicate, and_, eq, gte, icontains, lte, or_
from src.utils.exceptions import InvalidFilterError


def build_user_filter(
    search: Optional[str] = None,
    min_age: Optional[int] = None,
    max_age: Optional[int] = None,
    is_deleted: bool = False,
) -> Predicate:
    """
    Собрать предикат выборки пользователей (условия объединяются через AND).

    Args:
        search: Подстрока для поиска по имени или email (без учета регистра)
        min_age: Минимальный возраст (включительно)
        max_age: Максимальный возраст (включительно)
        is_deleted: Статус удаления; по умолчанию только активные записи

    Returns:
        Дерево предикатов

    Raises:
        InvalidFilterError: Если min_age > max_age
    """
    if min_age is not None and max_age is not None and min_age > max_age:
        raise InvalidFilterError(
            f"minAge ({min_age}) must not be greater than maxAge ({max_age})"
        )

    conditions = [eq("is_deleted", is_deleted)]

    # Пустая или пробельная строка поиска не фильтрует, остальные идут как есть
    if search and search.strip():
        conditions.append(or_(icontains("name", search), icontains("email", search)))

    if min_age is not None:
        conditions.append(gte("age", min_age))
    if max_age is not None:
        conditions.append(lte("age", max_age))

    return and_(*conditions)
