# -*- coding: utf-8 -*-
"""
app/modules/checkout/http.py

Capa HTTP independiente del runtime (ASGI, eventos serverless).

- Cabeceras CORS fijas en todas las respuestas.
- Gate de método ANTES de parsear el cuerpo:
    OPTIONS -> 200 sin cuerpo, POST -> checkout, resto -> 405.
- Decodificación del cuerpo: JSON por defecto, form-urlencoded si el
  Content-Type lo declara. Cuerpo vacío = objeto vacío (faltan campos);
  JSON inválido o que no sea objeto = 400 "Invalid JSON body".

Fecha: 2026-10-19
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl

from .catalog import CheckoutConfig
from .errors import InvalidRequestBodyError, MethodNotAllowedError, internal_error_body
from .metrics import record_outcome
from .pricing import PricingStrategy
from .schemas import CheckoutRequest
from .service import CheckoutProvider, CheckoutResponse, create_checkout_session

logger = logging.getLogger(__name__)

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

RawBody = Union[bytes, str, None]


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))
    body: str = ""


def header_value(headers: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    """Búsqueda de cabecera sin distinguir mayúsculas."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if str(key).lower() == wanted:
            return str(value) if value else None
    return None


def decode_body(raw: RawBody, content_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Decodifica el cuerpo entrante a un dict.

    Raises:
        InvalidRequestBodyError: cuerpo no decodificable o que no es objeto.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidRequestBodyError() from None
    if not raw or not raw.strip():
        return {}

    if content_type and content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        return dict(parse_qsl(raw, keep_blank_values=True))

    try:
        data = json.loads(raw)
    except ValueError:
        raise InvalidRequestBodyError() from None
    if not isinstance(data, dict):
        raise InvalidRequestBodyError()
    return data


def json_response(status_code: int, body: Dict[str, Any]) -> HandlerResponse:
    headers = dict(CORS_HEADERS)
    headers["Content-Type"] = JSON_CONTENT_TYPE
    return HandlerResponse(
        status_code=status_code,
        headers=headers,
        body=json.dumps(body, ensure_ascii=False),
    )


def from_checkout_response(response: CheckoutResponse) -> HandlerResponse:
    return json_response(response.status_code, response.body)


async def handle_checkout_request(
    method: str,
    headers: Optional[Mapping[str, Any]],
    body: RawBody,
    *,
    config: CheckoutConfig,
    pricing: PricingStrategy,
    provider: CheckoutProvider,
) -> HandlerResponse:
    """
    Punto de entrada común para cualquier runtime.

    Nunca lanza: cualquier fallo queda convertido en HandlerResponse.
    """
    method = (method or "").upper()

    if method == "OPTIONS":
        return HandlerResponse(status_code=200)

    if method != "POST":
        error = MethodNotAllowedError()
        record_outcome(pricing.variant, error.kind)
        return json_response(int(error.status_code), error.to_body())

    try:
        data = decode_body(body, header_value(headers, "content-type"))
    except InvalidRequestBodyError as exc:
        logger.warning("Checkout rejected (%s): %s", exc.kind, exc.error)
        record_outcome(pricing.variant, exc.kind)
        return json_response(int(exc.status_code), exc.to_body())

    try:
        request = CheckoutRequest.from_mapping(data)
    except Exception as exc:
        logger.exception("Error creating checkout session: %s", exc)
        record_outcome(pricing.variant, "internal_error")
        return json_response(500, internal_error_body(exc))

    response = await create_checkout_session(
        request,
        config=config,
        pricing=pricing,
        provider=provider,
        origin=header_value(headers, "origin"),
    )
    return from_checkout_response(response)


__all__ = [
    "CORS_HEADERS",
    "HandlerResponse",
    "decode_body",
    "handle_checkout_request",
    "header_value",
    "json_response",
]

# Fin del archivo app/modules/checkout/http.py
