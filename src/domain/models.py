# -*- coding: utf-8 -*-
"""
UserRegistry/src/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
ORM модели SQLAlchemy 2.0.

Запись пользователя с флагом мягкого удаления. Уникальность email
обеспечивается индексом на всю таблицу, независимо от статуса удаления.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (Boolean, DateTime, Index, Integer, String, Uuid,
                        false, func)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("uq_users_email", "email", unique=True),
        # Выборки по статусу удаления + ID
        Index("ix_users_is_deleted_id", "is_deleted", "id"),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} is_deleted={self.is_deleted}>"


# Проекция для ответов API
PUBLIC_FIELDS = ("id", "name", "email", "age", "created_at", "updated_at")
