# -*- coding: utf-8 -*-
"""
app/shared/middleware/exception_handler.py

Middleware ASGI para capturar excepciones no manejadas y responder JSON.

Última línea de defensa: ningún fallo llega al runtime de hosting como
error no manejado. El cuerpo es el mismo 500 del checkout
({error, message}) e incluye request_id para trazabilidad.

Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.modules.checkout.errors import internal_error_body
from app.modules.checkout.http import CORS_HEADERS
from app.shared.utils.json_response import UTF8JSONResponse

logger = logging.getLogger(__name__)

# Header para request ID (Vercel, Netlify, nginx, etc.)
REQUEST_ID_HEADERS = ["x-request-id", "x-vercel-id", "x-nf-request-id", "x-correlation-id"]


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware que captura excepciones no manejadas y devuelve JSON.

    Garantiza:
    - Content-Type: application/json
    - cabeceras CORS (el navegador debe poder leer el error)
    - request_id para correlación de logs
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return UTF8JSONResponse(
                status_code=500,
                content=internal_error_body(e),
                headers={**CORS_HEADERS, "X-Request-ID": request_id},
            )


__all__ = ["JSONExceptionMiddleware", "get_request_id"]

# Fin del archivo app/shared/middleware/exception_handler.py
