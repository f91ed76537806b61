# -*- coding: utf-8 -*-
"""
UserRegistry/src/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена UserRegistry.

Этот модуль содержит перечисления, используемые в запросах списка
пользователей и в дереве предикатов.
"""

import enum


class SortOrder(str, enum.Enum):
    """Направление сортировки."""

    ASC = "asc"
    DESC = "desc"


class UserSortField(str, enum.Enum):
    """Поля, по которым разрешена сортировка (имена в API)."""

    NAME = "name"
    EMAIL = "email"
    AGE = "age"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @property
    def column(self) -> str:
        """Имя колонки в хранилище."""
        return _SORT_COLUMNS[self]


_SORT_COLUMNS = {
    UserSortField.NAME: "name",
    UserSortField.EMAIL: "email",
    UserSortField.AGE: "age",
    UserSortField.CREATED_AT: "created_at",
    UserSortField.UPDATED_AT: "updated_at",
}


class Operator(str, enum.Enum):
    """Операторы сравнения в дереве предикатов."""

    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    ICONTAINS = "icontains"  # Подстрока без учета регистра
    IN = "in"
