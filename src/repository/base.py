# -*- coding: utf-8 -*-
"""
UserRegistry/src/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository helpers shared by the SQLAlchemy stores.

This module compiles backend-agnostic predicate trees into SQLAlchemy 2.0
expressions, converts ORM rows into plain documents and translates driver
failures into the typed store errors. It is stateless for unit testing
simplicity.
"""

from __future__ import annotations

import re
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Type

from loguru import logger
from sqlalchemy import and_, or_
from sqlalchemy.exc import (DBAPIError, IntegrityError, InterfaceError,
                            OperationalError)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.sql.elements import ColumnElement

from src.domain.enums import Operator, SortOrder
from src.domain.models import Base
from src.domain.predicates import And, Comparison, Or, Predicate
from src.utils.exceptions import DuplicateKeyError, StoreUnavailableError

SortSpec = Tuple[str, SortOrder]

# PostgreSQL: Key (email)=(...) already exists / SQLite: UNIQUE constraint failed: users.email
_CONFLICT_FIELD_PATTERNS = (
    re.compile(r"Key \((\w+)\)="),
    re.compile(r"UNIQUE constraint failed: \w+\.(\w+)"),
    re.compile(r"uq_\w+?_(\w+)\"?"),
)

# ---------------------------------------------------------------------------
# Predicate compilation
# ---------------------------------------------------------------------------


def _column(model: Type[Base], field: str):
    column = getattr(model, field, None)
    if column is None:
        raise ValueError(f"{model.__name__} has no field {field!r}")
    return column


def compile_predicate(model: Type[Base], predicate: Predicate) -> ColumnElement[bool]:
    """Compile a predicate tree into a SQLAlchemy boolean expression."""
    if isinstance(predicate, And):
        return and_(*(compile_predicate(model, p) for p in predicate.operands))
    if isinstance(predicate, Or):
        return or_(*(compile_predicate(model, p) for p in predicate.operands))
    if not isinstance(predicate, Comparison):
        raise TypeError(f"Unsupported predicate node: {predicate!r}")

    column = _column(model, predicate.field)
    op = predicate.op
    if op is Operator.EQ:
        return column == predicate.value
    if op is Operator.GTE:
        return column >= predicate.value
    if op is Operator.LTE:
        return column <= predicate.value
    if op is Operator.ICONTAINS:
        # Спецсимволы LIKE (% и _) в поисковой строке экранируются
        return column.icontains(predicate.value, autoescape=True)
    if op is Operator.IN:
        return column.in_(list(predicate.value))
    raise ValueError(f"Unsupported operator: {op!r}")


def compile_sort(model: Type[Base], sort: Iterable[SortSpec]) -> list:
    """Compile (field, order) pairs into ORDER BY clauses."""
    clauses = []
    for field, order in sort:
        column = _column(model, field)
        clauses.append(column.asc() if order is SortOrder.ASC else column.desc())
    return clauses


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def to_document(
    instance: Base, projection: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """Convert an ORM instance into a plain dict limited to ``projection``."""
    fields = projection or [column.key for column in instance.__table__.columns]
    return {field: getattr(instance, field) for field in fields}


def row_to_document(row, projection: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Convert a Core result row into a plain dict limited to ``projection``."""
    mapping = dict(row._mapping)
    if projection:
        return {field: mapping[field] for field in projection}
    return mapping


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


def extract_conflict_field(exc: IntegrityError) -> Optional[str]:
    """Best-effort extraction of the violated unique field from a driver error."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    for pattern in _CONFLICT_FIELD_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group(1)
    return None


@asynccontextmanager
async def translate_store_errors(operation: str):
    """Map SQLAlchemy/driver failures onto DuplicateKeyError / StoreUnavailableError."""
    try:
        yield
    except IntegrityError as e:
        field = extract_conflict_field(e)
        logger.warning(f"Нарушение уникальности в {operation}: поле={field}")
        raise DuplicateKeyError(field=field, message=str(e.orig)) from e
    except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as e:
        logger.error(f"Хранилище недоступно ({operation}): {type(e).__name__}: {e}")
        raise StoreUnavailableError() from e
    except DBAPIError as e:
        if e.connection_invalidated:
            logger.error(f"Соединение с хранилищем потеряно ({operation}): {e}")
            raise StoreUnavailableError() from e
        raise
