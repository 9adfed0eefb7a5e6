# -*- coding: utf-8 -*-
"""
app/shared/middleware/__init__.py

Módulo de middlewares compartidos.
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id

__all__ = [
    "JSONExceptionMiddleware",
    "get_request_id",
]
