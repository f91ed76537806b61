# -*- coding: utf-8 -*-
"""
UserRegistry/src/core/clock.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Источник текущего времени для сервисов.

Сервисы получают часы через конструктор, чтобы отметки времени
(например, ``deleted_at``) можно было фиксировать в тестах.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return current UTC time."""
        ...


class SystemClock:
    """Системные часы (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Часы, всегда возвращающие заданный момент. Используются в тестах."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
