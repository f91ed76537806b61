# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/bulk.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Массовое создание пользователей с пропуском дубликатов.

Алгоритм: один запрос на существующие email (в любом статусе удаления),
разбиение кандидатов на вставляемые и пропущенные, одна пакетная вставка.
Проверка и вставка не атомарны: конкурентная вставка того же email между
ними приводит к BulkInsertError.
"""

from typing import List, Sequence

from loguru import logger

from src.domain.predicates import in_
from src.domain.schemas import (BulkCreateResult, SkippedRecord, UserCreate,
                                normalize_email)
from src.repository.users import UserStore
from src.utils.exceptions import BulkInsertError, DuplicateKeyError

REASON_EMAIL_EXISTS = "Email already exists"
REASON_DUPLICATE_IN_BATCH = "Duplicate email in batch"


class UserBulkService:
    """Сервис массового создания пользователей."""

    def __init__(self, store: UserStore):
        self.store = store

    async def bulk_create(self, candidates: Sequence[UserCreate]) -> BulkCreateResult:
        """
        Массово создать пользователей.

        Кандидаты с email, уже существующим в хранилище, пропускаются с
        причиной "Email already exists"; повтор email внутри пачки:
        с причиной "Duplicate email in batch" (вставляется первое вхождение).
        Порядок вставки и порядок пропусков совпадают с порядком входа.

        Args:
            candidates: Проверенные данные пользователей

        Returns:
            Количество вставленных записей и список пропущенных

        Raises:
            BulkInsertError: Если хранилище отклонило пакетную вставку
            StoreUnavailableError: Если хранилище недоступно
        """
        if not candidates:
            return BulkCreateResult(inserted_count=0, skipped=[])

        emails = [normalize_email(candidate.email) for candidate in candidates]
        existing = await self.store.find_many(
            in_("email", sorted(set(emails))), projection=("email",)
        )
        existing_emails = {document["email"] for document in existing}

        accepted: List[dict] = []
        accepted_emails = set()
        skipped: List[SkippedRecord] = []

        for candidate, email in zip(candidates, emails):
            if email in existing_emails:
                skipped.append(SkippedRecord(email=email, reason=REASON_EMAIL_EXISTS))
                continue
            if email in accepted_emails:
                skipped.append(
                    SkippedRecord(email=email, reason=REASON_DUPLICATE_IN_BATCH)
                )
                continue
            accepted_emails.add(email)
            accepted.append(
                {
                    "name": candidate.name,
                    "email": email,
                    "age": candidate.age,
                    "is_deleted": False,
                    "deleted_at": None,
                }
            )

        if accepted:
            try:
                await self.store.insert_many(accepted)
            except DuplicateKeyError as e:
                logger.error(
                    f"Пакетная вставка {len(accepted)} пользователей отклонена: {e}"
                )
                raise BulkInsertError(
                    f"Bulk insert rejected by the store: {e.field or 'unique'} "
                    f"constraint violated (best-effort, not transactional)",
                    attempted=len(accepted),
                ) from e

        logger.info(
            f"Массовое создание: вставлено {len(accepted)}, пропущено {len(skipped)}"
        )
        return BulkCreateResult(inserted_count=len(accepted), skipped=skipped)
