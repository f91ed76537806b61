# -*- coding: utf-8 -*-
"""
UserRegistry/src/service/users/pagination.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Расчет смещения и количества страниц.
"""

import math
from typing import NamedTuple

from src.domain.schemas import MAX_PAGE_SIZE


class Pagination(NamedTuple):
    skip: int
    limit: int


def calculate_skip(page: int, page_size: int) -> Pagination:
    """
    Смещение для страницы.

    Номер страницы не ограничивается сверху: страница за пределами
    выборки просто окажется пустой.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be in 1..{MAX_PAGE_SIZE}, got {page_size}")
    return Pagination(skip=(page - 1) * page_size, limit=page_size)


def calculate_total_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size); 0 для пустой выборки."""
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total / page_size)
