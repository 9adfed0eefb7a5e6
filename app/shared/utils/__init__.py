# -*- coding: utf-8 -*-
"""Utilidades comunes de respuesta HTTP."""

from .json_response import UTF8JSONResponse

__all__ = ["UTF8JSONResponse"]
