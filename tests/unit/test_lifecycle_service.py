# -*- coding: utf-8 -*-
"""
Unit тесты для UserLifecycleService
"""

import uuid

import pytest

from src.domain.predicates import eq
from src.domain.schemas import UserCreate, UserUpdate
from src.service.users import UserLifecycleService, parse_user_id
from src.utils.exceptions import (DuplicateEmailError, InvalidIdError,
                                  NotFoundError)
from tests.fixtures import FIXED_NOW, create_test_user


@pytest.fixture
def service(store, fixed_clock):
    return UserLifecycleService(store, clock=fixed_clock)


def _naive(moment):
    return moment.replace(tzinfo=None) if moment is not None else None


class TestParseUserId:
    """Тесты проверки идентификатора"""

    def test_valid_uuid(self):
        value = uuid.uuid4()

        assert parse_user_id(str(value)) == value
        assert parse_user_id(value) is value

    @pytest.mark.parametrize("raw", ["", "123", "not-a-uuid", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
    def test_malformed_id(self, raw):
        with pytest.raises(InvalidIdError) as exc_info:
            parse_user_id(raw)

        assert exc_info.value.status_code == 400


class TestUserLifecycleService:
    """Тесты жизненного цикла записи пользователя"""

    @pytest.mark.asyncio
    async def test_create_normalizes_email(self, service):
        """Email сохраняется в нижнем регистре"""
        user = await service.create(
            UserCreate(name="  John Doe ", email="John.Doe@Mail.com", age=25)
        )

        assert user.email == "john.doe@mail.com"
        assert user.name == "John Doe"

    @pytest.mark.asyncio
    async def test_create_duplicate_differs_only_by_case(self, service):
        """Email, отличающиеся только регистром,: дубликаты"""
        await service.create(UserCreate(name="John", email="john@x.com", age=25))

        with pytest.raises(DuplicateEmailError) as exc_info:
            await service.create(UserCreate(name="Johnny", email="JOHN@X.COM", age=30))

        assert exc_info.value.status_code == 409
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_deleted_record_still_reserves_email(self, service):
        """Мягко удаленная запись продолжает занимать свой email"""
        user = await service.create(UserCreate(name="John", email="john@x.com", age=25))
        await service.remove(user.id)

        with pytest.raises(DuplicateEmailError):
            await service.create(UserCreate(name="John", email="john@x.com", age=25))

    @pytest.mark.asyncio
    async def test_find_one_hides_deleted(self, service, store):
        """find_one не возвращает удаленные записи"""
        user = await create_test_user(store, is_deleted=True, deleted_at=FIXED_NOW)

        with pytest.raises(NotFoundError):
            await service.find_one(str(user["id"]))

    @pytest.mark.asyncio
    async def test_find_one_unknown_id(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.find_one(str(uuid.uuid4()))

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, service, store):
        """Обновляются только переданные поля"""
        user = await create_test_user(store, name="John Smith", age=30)

        updated = await service.update(str(user["id"]), UserUpdate(age=31))

        assert updated.age == 31
        assert updated.name == "John Smith"
        assert updated.email == user["email"]

    @pytest.mark.asyncio
    async def test_empty_update_returns_current_record(self, service, store):
        """Пустое обновление возвращает запись без изменений"""
        user = await create_test_user(store)

        result = await service.update(str(user["id"]), UserUpdate())

        assert result.id == user["id"]
        assert result.age == user["age"]

    @pytest.mark.asyncio
    async def test_update_deleted_record(self, service, store):
        """Удаленную запись обновить нельзя"""
        user = await create_test_user(store, is_deleted=True, deleted_at=FIXED_NOW)

        with pytest.raises(NotFoundError):
            await service.update(str(user["id"]), UserUpdate(age=50))

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, service, store):
        """Смена email на занятый другой записью -> конфликт"""
        await create_test_user(store, email="first@example.com")
        second = await create_test_user(store, email="second@example.com")

        with pytest.raises(DuplicateEmailError):
            await service.update(str(second["id"]), UserUpdate(email="FIRST@example.com"))

    @pytest.mark.asyncio
    async def test_remove_sets_flag_and_timestamp(self, service, store):
        """Удаление выставляет is_deleted и deleted_at одновременно"""
        user = await create_test_user(store)

        await service.remove(str(user["id"]))

        stored = await store.find_one_matching(eq("id", user["id"]))
        assert stored["is_deleted"] is True
        assert _naive(stored["deleted_at"]) == _naive(FIXED_NOW)

    @pytest.mark.asyncio
    async def test_remove_twice(self, service, store):
        """Повторное удаление -> NotFoundError"""
        user = await create_test_user(store)
        await service.remove(str(user["id"]))

        with pytest.raises(NotFoundError):
            await service.remove(str(user["id"]))

    @pytest.mark.asyncio
    async def test_remove_then_restore_returns_record(self, service, store):
        """remove -> restore возвращает запись в исходное состояние"""
        # Arrange
        user = await create_test_user(store, name="Jane Roe", email="jane@example.com", age=41)

        # Act
        await service.remove(str(user["id"]))
        restored = await service.restore(str(user["id"]))

        # Assert
        assert (restored.id, restored.name, restored.email, restored.age) == (
            user["id"],
            "Jane Roe",
            "jane@example.com",
            41,
        )
        stored = await store.find_one_matching(eq("id", user["id"]))
        assert stored["is_deleted"] is False
        assert stored["deleted_at"] is None

    @pytest.mark.asyncio
    async def test_restore_active_record(self, service, store):
        """Восстановление активной записи -> NotFoundError"""
        user = await create_test_user(store)

        with pytest.raises(NotFoundError) as exc_info:
            await service.restore(str(user["id"]))

        assert "Deleted user" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_invalid_id_never_reaches_store(self, service):
        """Некорректный ID отклоняется до обращения к хранилищу"""
        with pytest.raises(InvalidIdError):
            await service.update("bad-id", UserUpdate(age=20))
        with pytest.raises(InvalidIdError):
            await service.remove("bad-id")
        with pytest.raises(InvalidIdError):
            await service.restore("bad-id")
