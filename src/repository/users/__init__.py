# -*- coding: utf-8 -*-
"""
UserRegistry/src/repository/users/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Хранилище записей пользователей.
"""

from .store import SqlAlchemyUserStore, UserStore

__all__ = [
    "UserStore",
    "SqlAlchemyUserStore",
]
