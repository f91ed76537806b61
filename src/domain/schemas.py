# -*- coding: utf-8 -*-
"""
UserRegistry/src/domain/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Схемы Pydantic: типизированный контракт между HTTP слоем и сервисами.

Все ограничения формы (длина имени, формат email, диапазон возраста,
границы пагинации) проверяются здесь, до обращения к сервисам.
Наружу поля отдаются в camelCase.
"""

import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import (BaseModel, ConfigDict, EmailStr, Field, StringConstraints,
                      field_validator)
from pydantic.alias_generators import to_camel

from src.domain.enums import SortOrder, UserSortField

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MIN_AGE = 1
MAX_AGE = 150

UserName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)
]
UserAge = Annotated[int, Field(ge=MIN_AGE, le=MAX_AGE)]


def normalize_email(email: str) -> str:
    """Привести email к каноническому виду (trim + lower)."""
    return email.strip().lower()


class CamelModel(BaseModel):
    """Базовая схема: camelCase снаружи, snake_case внутри."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(CamelModel):
    """Схема для создания пользователя."""

    name: UserName
    email: EmailStr
    age: UserAge

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {"name": "John Doe", "email": "john.doe@mail.com", "age": 25}
        },
    )

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)


class UserUpdate(CamelModel):
    """Схема для частичного обновления пользователя (только переданные поля)."""

    name: Optional[UserName] = None
    email: Optional[EmailStr] = None
    age: Optional[UserAge] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": {"name": "John Doe Updated", "age": 26}},
    )

    @field_validator("name", "email", "age", mode="before")
    @classmethod
    def _reject_null(cls, value):
        # Явный null не означает "очистить поле": все поля записи обязательны
        if value is None:
            raise ValueError("field may be omitted but must not be null")
        return value

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)

    def to_patch(self) -> dict:
        """Только поля, явно переданные клиентом."""
        return self.model_dump(exclude_unset=True)


class UserQuery(CamelModel):
    """Параметры выборки списка пользователей."""

    search: Optional[str] = None
    min_age: Optional[UserAge] = None
    max_age: Optional[UserAge] = None
    is_deleted: bool = False
    page: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: UserSortField = UserSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class UserRead(CamelModel):
    """Схема для чтения данных пользователя (без служебных полей)."""

    id: uuid.UUID
    name: str
    email: str
    age: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class PaginationMeta(CamelModel):
    total: int
    page: int
    page_size: int
    total_pages: int


class UserPage(CamelModel):
    data: List[UserRead]
    meta: PaginationMeta


class BulkCreateRequest(CamelModel):
    """Схема для массового создания пользователей."""

    users: List[UserCreate]


class SkippedRecord(CamelModel):
    email: str
    reason: str


class BulkCreateResult(CamelModel):
    """Результат массового создания."""

    inserted_count: int
    skipped: List[SkippedRecord] = []
