# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/lifecycle.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Жизненный цикл записи пользователя: создание, чтение, обновление,
мягкое удаление и восстановление.

Каждый переход состояния: один условный find_one_and_update
(совпадение по id и ожидаемому is_deleted), без чтения перед записью.
"""

import uuid
from typing import Optional

from loguru import logger

from src.core.clock import Clock, SystemClock
from src.domain.models import PUBLIC_FIELDS
from src.domain.predicates import and_, eq
from src.domain.schemas import UserCreate, UserRead, UserUpdate, normalize_email
from src.repository.users import UserStore
from src.utils.exceptions import (DuplicateEmailError, DuplicateKeyError,
                                  InvalidIdError, NotFoundError)


def parse_user_id(user_id) -> uuid.UUID:
    """
    Проверить синтаксис идентификатора до обращения к хранилищу.

    Raises:
        InvalidIdError: Если строка не является UUID
    """
    if isinstance(user_id, uuid.UUID):
        return user_id
    try:
        return uuid.UUID(str(user_id).strip())
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdError(str(user_id)) from None


class UserLifecycleService:
    """Сервис операций над одной записью пользователя."""

    def __init__(self, store: UserStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or SystemClock()

    async def create(self, data: UserCreate) -> UserRead:
        """
        Создать нового пользователя.

        Args:
            data: Данные нового пользователя

        Returns:
            Созданный пользователь

        Raises:
            DuplicateEmailError: Если email уже занят (в любом статусе удаления)
        """
        email = normalize_email(data.email)
        document = {
            "name": data.name,
            "email": email,
            "age": data.age,
            "is_deleted": False,
            "deleted_at": None,
        }
        try:
            created = await self.store.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning(f"Email {email} уже существует")
            raise DuplicateEmailError(email, field=e.field or "email") from e

        logger.info(f"Пользователь {email} создан с ID {created['id']}")
        return UserRead.model_validate(created)

    async def find_one(self, user_id) -> UserRead:
        """
        Получить активного пользователя по ID.

        Raises:
            InvalidIdError: Если ID некорректен
            NotFoundError: Если пользователя нет или он удален
        """
        uid = parse_user_id(user_id)
        document = await self.store.find_one_matching(
            and_(eq("id", uid), eq("is_deleted", False)), projection=PUBLIC_FIELDS
        )
        if document is None:
            raise NotFoundError("User", uid)
        return UserRead.model_validate(document)

    async def update(self, user_id, data: UserUpdate) -> UserRead:
        """
        Обновить только переданные поля активного пользователя.

        Args:
            user_id: ID пользователя
            data: Частичные данные

        Returns:
            Обновленный пользователь

        Raises:
            InvalidIdError: Если ID некорректен
            NotFoundError: Если активного пользователя нет
            DuplicateEmailError: Если новый email занят другой записью
        """
        uid = parse_user_id(user_id)
        patch = data.to_patch()
        if not patch:
            return await self.find_one(uid)
        if "email" in patch:
            patch["email"] = normalize_email(patch["email"])

        try:
            document = await self.store.find_one_and_update(
                and_(eq("id", uid), eq("is_deleted", False)),
                patch,
                projection=PUBLIC_FIELDS,
            )
        except DuplicateKeyError as e:
            logger.warning(f"Конфликт при обновлении пользователя {uid}: {e.field}")
            raise DuplicateEmailError(patch.get("email"), field=e.field or "email") from e

        if document is None:
            logger.warning(f"Пользователь с ID {uid} не найден для обновления")
            raise NotFoundError("User", uid)

        logger.info(f"Пользователь {uid} обновлен: {sorted(patch)}")
        return UserRead.model_validate(document)

    async def remove(self, user_id) -> None:
        """
        Мягко удалить активного пользователя (is_deleted=True, deleted_at=now).

        Raises:
            InvalidIdError: Если ID некорректен
            NotFoundError: Если активного пользователя нет
        """
        uid = parse_user_id(user_id)
        matched = await self.store.find_one_and_update(
            and_(eq("id", uid), eq("is_deleted", False)),
            {"is_deleted": True, "deleted_at": self.clock.now()},
            return_updated=False,
        )
        if matched is None:
            logger.warning(f"Пользователь с ID {uid} не найден для удаления")
            raise NotFoundError("User", uid)
        logger.info(f"Пользователь {uid} помечен как удаленный")

    async def restore(self, user_id) -> UserRead:
        """
        Восстановить мягко удаленного пользователя.

        Returns:
            Восстановленный пользователь

        Raises:
            InvalidIdError: Если ID некорректен
            NotFoundError: Если удаленного пользователя с таким ID нет
        """
        uid = parse_user_id(user_id)
        document = await self.store.find_one_and_update(
            and_(eq("id", uid), eq("is_deleted", True)),
            {"is_deleted": False, "deleted_at": None},
            projection=PUBLIC_FIELDS,
        )
        if document is None:
            logger.warning(f"Удаленный пользователь с ID {uid} не найден")
            raise NotFoundError("Deleted user", uid)
        logger.info(f"Пользователь {uid} восстановлен")
        return UserRead.model_validate(document)
