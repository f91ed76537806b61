# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/management/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Операции управления пользователями.
"""

from .archive import router as archive_router
from .bulk import router as bulk_router

__all__ = ["bulk_router", "archive_router"]
