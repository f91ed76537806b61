# -*- coding: utf-8 -*-
"""
Фикстуры и заглушки для тестирования пользователей
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from src.repository.users import SqlAlchemyUserStore
from src.utils.exceptions import DuplicateKeyError

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


async def create_test_user(
    store: SqlAlchemyUserStore,
    name: str = "John Smith",
    email: str = "john@example.com",
    age: int = 30,
    is_deleted: bool = False,
    deleted_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Создать тестового пользователя напрямую в хранилище"""
    return await store.insert_one(
        {
            "name": name,
            "email": email,
            "age": age,
            "is_deleted": is_deleted,
            "deleted_at": deleted_at,
        }
    )


async def create_test_users(
    store: SqlAlchemyUserStore, count: int = 3, age: int = 30, prefix: str = "user"
) -> List[Dict[str, Any]]:
    """Создать несколько тестовых пользователей"""
    users = []
    for i in range(count):
        users.append(
            await create_test_user(
                store,
                name=f"Test User {i}",
                email=f"{prefix}{i}@example.com",
                age=age,
            )
        )
    return users


class RecordingStore:
    """
    Заглушка хранилища: отдает заранее заданные данные и запоминает вызовы.

    ``insert_error`` выбрасывается из insert_many (имитация конкурентной
    вставки того же email между проверкой и вставкой).
    """

    def __init__(
        self,
        existing: Optional[List[Dict[str, Any]]] = None,
        total: int = 0,
        insert_error: Optional[Exception] = None,
        error: Optional[Exception] = None,
    ):
        self.existing = existing or []
        self.total = total
        self.insert_error = insert_error
        self.error = error
        self.calls: List[str] = []
        self.inserted: List[Dict[str, Any]] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    async def find_many(self, predicate, *, projection=None, sort=(), skip=0, limit=None):
        self._record("find_many")
        return list(self.existing)

    async def count(self, predicate):
        self._record("count")
        return self.total

    async def find_one_matching(self, predicate, *, projection=None):
        self._record("find_one_matching")
        return None

    async def insert_one(self, document):
        self._record("insert_one")
        raise DuplicateKeyError(field="email")

    async def insert_many(self, documents):
        self._record("insert_many")
        if self.insert_error is not None:
            raise self.insert_error
        self.inserted.extend(documents)
        return list(documents)

    async def find_one_and_update(
        self, predicate, patch, *, return_updated=True, projection=None
    ):
        self._record("find_one_and_update")
        return None
