# -*- coding: utf-8 -*-
"""
app/shared/utils/json_response.py

JSONResponse con charset UTF-8 explícito.

Se usa como default_response_class de la app (health, metadata) y en
el middleware de excepciones, para que los mensajes de error con
acentos lleguen intactos aunque el proxy no asuma UTF-8.

Fecha: 2026-10-19
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


__all__ = ["UTF8JSONResponse"]

# Fin del archivo app/shared/utils/json_response.py
