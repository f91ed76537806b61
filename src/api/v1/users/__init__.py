# -*- coding: utf-8 -*-
"""
UserRegistry/src/api/v1/users/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from .routes import router

__all__ = ["router"]
