# -*- coding: utf-8 -*-
"""
Unit тесты для UserBulkService
"""

import pytest

from src.domain.predicates import eq
from src.domain.schemas import UserCreate
from src.service.users import UserBulkService
from src.service.users.bulk import (REASON_DUPLICATE_IN_BATCH,
                                    REASON_EMAIL_EXISTS)
from src.utils.exceptions import BulkInsertError, DuplicateKeyError
from tests.fixtures import RecordingStore, create_test_user


def _candidate(email: str, name: str = "Test User", age: int = 30) -> UserCreate:
    return UserCreate(name=name, email=email, age=age)


class TestUserBulkService:
    """Тесты массового создания пользователей"""

    @pytest.mark.asyncio
    async def test_existing_email_skipped(self, store):
        """a@x.com уже есть: вставляется только b@x.com"""
        # Arrange
        await create_test_user(store, email="a@x.com")

        # Act
        result = await UserBulkService(store).bulk_create(
            [_candidate("a@x.com"), _candidate("b@x.com")]
        )

        # Assert
        assert result.inserted_count == 1
        assert [(s.email, s.reason) for s in result.skipped] == [
            ("a@x.com", REASON_EMAIL_EXISTS)
        ]
        assert await store.count(eq("email", "b@x.com")) == 1

    @pytest.mark.asyncio
    async def test_deleted_record_email_skipped(self, store):
        """Email удаленной записи тоже считается занятым"""
        await create_test_user(store, email="gone@x.com", is_deleted=True)

        result = await UserBulkService(store).bulk_create([_candidate("GONE@x.com")])

        assert result.inserted_count == 0
        assert result.skipped[0].reason == REASON_EMAIL_EXISTS

    @pytest.mark.asyncio
    async def test_duplicate_within_batch(self, store):
        """Повтор внутри пачки: вставляется первое вхождение"""
        result = await UserBulkService(store).bulk_create(
            [
                _candidate("dup@x.com", name="First"),
                _candidate("other@x.com"),
                _candidate("Dup@X.com", name="Second"),
            ]
        )

        assert result.inserted_count == 2
        assert [(s.email, s.reason) for s in result.skipped] == [
            ("dup@x.com", REASON_DUPLICATE_IN_BATCH)
        ]
        stored = await store.find_one_matching(eq("email", "dup@x.com"))
        assert stored["name"] == "First"

    @pytest.mark.asyncio
    async def test_empty_input(self):
        """Пустой вход не обращается к хранилищу"""
        fake = RecordingStore()

        result = await UserBulkService(fake).bulk_create([])

        assert result.inserted_count == 0
        assert result.skipped == []
        assert fake.calls == []

    @pytest.mark.asyncio
    async def test_all_skipped_does_not_insert(self):
        """Если все кандидаты пропущены, вставка не выполняется"""
        fake = RecordingStore(existing=[{"email": "a@x.com"}])

        result = await UserBulkService(fake).bulk_create([_candidate("a@x.com")])

        assert result.inserted_count == 0
        assert fake.calls == ["find_many"]

    @pytest.mark.asyncio
    async def test_concurrent_insert_reported(self):
        """Конфликт при вставке (гонка после проверки) -> BulkInsertError"""
        fake = RecordingStore(insert_error=DuplicateKeyError(field="email"))

        with pytest.raises(BulkInsertError) as exc_info:
            await UserBulkService(fake).bulk_create(
                [_candidate("a@x.com"), _candidate("b@x.com")]
            )

        assert exc_info.value.attempted == 2
        assert exc_info.value.status_code == 409
        assert exc_info.value.error_code == "BULK_INSERT_FAILED"

    @pytest.mark.asyncio
    async def test_insert_order_follows_input(self):
        """Порядок вставки совпадает с порядком входа"""
        fake = RecordingStore()

        await UserBulkService(fake).bulk_create(
            [_candidate("c@x.com"), _candidate("a@x.com"), _candidate("b@x.com")]
        )

        assert [d["email"] for d in fake.inserted] == ["c@x.com", "a@x.com", "b@x.com"]
