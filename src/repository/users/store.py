# -*- coding: utf-8 -*-
"""
UserRegistry/src/repository/users/store.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Хранилище записей пользователей.

``UserStore``: интерфейс, от которого зависят сервисы.
``SqlAlchemyUserStore``: его реализация поверх async SQLAlchemy.

Каждый вызов открывает собственную сессию из фабрики, поэтому независимые
чтения можно выполнять конкурентно (asyncio.gather).
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from loguru import logger
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.models import User
from src.domain.predicates import Predicate
from src.repository.base import (SortSpec, compile_predicate, compile_sort,
                                 row_to_document, to_document,
                                 translate_store_errors)


class UserStore(Protocol):
    """Интерфейс хранилища записей пользователей."""

    async def find_many(
        self,
        predicate: Predicate,
        *,
        projection: Optional[Sequence[str]] = None,
        sort: Sequence[SortSpec] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        ...

    async def count(self, predicate: Predicate) -> int:
        ...

    async def find_one_matching(
        self, predicate: Predicate, *, projection: Optional[Sequence[str]] = None
    ) -> Optional[Dict[str, Any]]:
        ...

    async def insert_one(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        ...

    async def insert_many(
        self, documents: Sequence[Mapping[str, Any]]
    ) -> List[Dict[str, Any]]:
        ...

    async def find_one_and_update(
        self,
        predicate: Predicate,
        patch: Mapping[str, Any],
        *,
        return_updated: bool = True,
        projection: Optional[Sequence[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        ...


class SqlAlchemyUserStore:
    """Реализация UserStore поверх SQLAlchemy 2.0 (PostgreSQL / SQLite)."""

    model = User

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_many(
        self,
        predicate: Predicate,
        *,
        projection: Optional[Sequence[str]] = None,
        sort: Sequence[SortSpec] = (),
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Получить записи, удовлетворяющие предикату.

        Args:
            predicate: Условие выборки
            projection: Возвращаемые поля (None: все колонки)
            sort: Пары (поле, направление) в порядке приоритета
            skip: Количество пропускаемых записей
            limit: Максимальное количество записей

        Returns:
            Список документов
        """
        stmt = select(self.model).where(compile_predicate(self.model, predicate))
        stmt = stmt.order_by(*compile_sort(self.model, sort))

        # Применяем пагинацию
        if skip > 0:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)

        async with translate_store_errors("find_many"):
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                items = result.scalars().all()

        logger.debug(f"Retrieved {len(items)} {self.model.__name__} items")
        return [to_document(item, projection) for item in items]

    async def count(self, predicate: Predicate) -> int:
        stmt = select(func.count()).select_from(self.model).where(
            compile_predicate(self.model, predicate)
        )
        async with translate_store_errors("count"):
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar() or 0

    async def find_one_matching(
        self, predicate: Predicate, *, projection: Optional[Sequence[str]] = None
    ) -> Optional[Dict[str, Any]]:
        stmt = (
            select(self.model)
            .where(compile_predicate(self.model, predicate))
            .limit(1)
        )
        async with translate_store_errors("find_one_matching"):
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                item = result.scalars().first()
        return to_document(item, projection) if item is not None else None

    async def insert_one(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Вставить одну запись.

        Raises:
            DuplicateKeyError: Если нарушен уникальный индекс
        """
        async with translate_store_errors("insert_one"):
            async with self._session_factory() as session:
                instance = self.model(**document)
                session.add(instance)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                await session.refresh(instance)
        return to_document(instance)

    async def insert_many(
        self, documents: Sequence[Mapping[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Вставить пачку записей одной транзакцией.

        При нарушении уникальности вызов отклоняется целиком.

        Raises:
            DuplicateKeyError: Если нарушен уникальный индекс
        """
        if not documents:
            return []

        async with translate_store_errors("insert_many"):
            async with self._session_factory() as session:
                instances = [self.model(**document) for document in documents]
                session.add_all(instances)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

                # Обновляем объекты после коммита
                for instance in instances:
                    await session.refresh(instance)

        return [to_document(instance) for instance in instances]

    async def find_one_and_update(
        self,
        predicate: Predicate,
        patch: Mapping[str, Any],
        *,
        return_updated: bool = True,
        projection: Optional[Sequence[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Атомарно обновить одну запись, удовлетворяющую предикату.

        Сопоставление и изменение выполняются одним UPDATE ... RETURNING,
        без отдельного чтения. Предикат должен однозначно определять
        запись (включать id).

        Args:
            predicate: Условие (включая ожидаемое состояние записи)
            patch: Новые значения полей
            return_updated: Вернуть обновленный документ; иначе только {"id": ...}
            projection: Возвращаемые поля

        Returns:
            Документ или None, если подходящей записи нет
        """
        table = self.model.__table__
        condition = compile_predicate(self.model, predicate)
        returning = table.c if return_updated else [table.c.id]
        stmt = (
            update(table)
            .where(condition)
            .values(**patch)
            .returning(*returning)
        )

        async with translate_store_errors("find_one_and_update"):
            async with self._session_factory() as session:
                try:
                    result = await session.execute(stmt)
                    row = result.first()
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        if row is None:
            return None
        if not return_updated:
            return row_to_document(row, ["id"])
        return row_to_document(row, projection)
