# -*- coding: utf-8 -*-
"""
UserRegistry/src/domain/predicates.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Дерево предикатов, не зависящее от хранилища.

Сервисы описывают условия выборки узлами ``Comparison``/``And``/``Or``,
а адаптер хранилища компилирует их в запрос своего бэкенда.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

from src.domain.enums import Operator


@dataclass(frozen=True)
class Comparison:
    """Сравнение поля записи со значением."""

    field: str
    op: Operator
    value: Any


@dataclass(frozen=True)
class And:
    """Конъюнкция: все операнды истинны."""

    operands: Tuple["Predicate", ...]


@dataclass(frozen=True)
class Or:
    """Дизъюнкция: хотя бы один операнд истинен."""

    operands: Tuple["Predicate", ...]


Predicate = Union[Comparison, And, Or]


def eq(field: str, value: Any) -> Comparison:
    return Comparison(field, Operator.EQ, value)


def gte(field: str, value: Any) -> Comparison:
    return Comparison(field, Operator.GTE, value)


def lte(field: str, value: Any) -> Comparison:
    return Comparison(field, Operator.LTE, value)


def icontains(field: str, value: str) -> Comparison:
    return Comparison(field, Operator.ICONTAINS, value)


def in_(field: str, values) -> Comparison:
    return Comparison(field, Operator.IN, tuple(values))


def and_(*operands: Predicate) -> Predicate:
    """Собрать конъюнкцию; один операнд возвращается как есть."""
    if not operands:
        raise ValueError("and_() requires at least one operand")
    if len(operands) == 1:
        return operands[0]
    return And(tuple(operands))


def or_(*operands: Predicate) -> Predicate:
    """Собрать дизъюнкцию; один операнд возвращается как есть."""
    if not operands:
        raise ValueError("or_() requires at least one operand")
    if len(operands) == 1:
        return operands[0]
    return Or(tuple(operands))
