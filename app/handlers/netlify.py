# -*- coding: utf-8 -*-
"""
app/handlers/netlify.py

Handlers por evento (Netlify Functions / AWS Lambda proxy).

Contrato del evento:
    {"httpMethod": "POST", "headers": {...}, "body": "...", "isBase64Encoded": false}
Respuesta:
    {"statusCode": 200, "headers": {...}, "body": "<json>"}

Cada invocación corre su propio event loop (asyncio.run), así que el
cliente Stripe se crea y se cierra por llamada en lugar de usar el
cliente global del servidor ASGI.

Fecha: 2026-10-19
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import Any, Dict, Mapping, Optional

from app.modules.checkout.catalog import CheckoutConfig
from app.modules.checkout.errors import InvalidRequestBodyError, internal_error_body
from app.modules.checkout.http import (
    HandlerResponse,
    handle_checkout_request,
    json_response,
)
from app.modules.checkout.pricing import CatalogPricing, DirectPricePricing, PricingStrategy
from app.modules.checkout.provider import StripeCheckoutClient
from app.shared.config.settings_checkout import CheckoutSettings, get_checkout_settings
from app.shared.core.stripe_client_cache import build_stripe_client, build_stripe_http_client

logger = logging.getLogger(__name__)


def _event_body(event: Mapping[str, Any]) -> Optional[bytes | str]:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidRequestBodyError() from None
    return body


def to_event_response(response: HandlerResponse) -> Dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": dict(response.headers),
        "body": response.body,
    }


async def handle_event(
    event: Mapping[str, Any],
    *,
    pricing: PricingStrategy,
    settings: Optional[CheckoutSettings] = None,
    provider: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Versión async del handler, inyectable en tests.

    Si no se pasa provider se construye un StripeCheckoutClient con un
    cliente Stripe propio de esta invocación.
    """
    settings = settings or get_checkout_settings()
    config = CheckoutConfig.from_settings(settings)
    method = str(event.get("httpMethod") or "")
    headers = event.get("headers") or {}

    try:
        # El cuerpo no se toca salvo para POST (gate de método primero)
        body = _event_body(event) if method.upper() == "POST" else None
    except InvalidRequestBodyError as exc:
        return to_event_response(json_response(int(exc.status_code), exc.to_body()))

    http_client = None
    if provider is None:
        stripe_client = None
        # Sin clave no se construye cliente: el proveedor responde 500
        if settings.is_provider_configured:
            http_client = build_stripe_http_client(settings)
            stripe_client = build_stripe_client(settings, http_client=http_client)
        provider = StripeCheckoutClient.from_settings(settings, stripe_client=stripe_client)

    try:
        response = await handle_checkout_request(
            method, headers, body, config=config, pricing=pricing, provider=provider
        )
    finally:
        if http_client is not None:
            await http_client.close_async()
    return to_event_response(response)


def _run(event: Mapping[str, Any], pricing: PricingStrategy) -> Dict[str, Any]:
    try:
        return asyncio.run(handle_event(event or {}, pricing=pricing))
    except Exception as exc:
        logger.exception("Error creating checkout session: %s", exc)
        return to_event_response(json_response(500, internal_error_body(exc)))


def handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Función create-checkout: pricing por productType."""
    return _run(event, CatalogPricing())


def legacy_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Función create-checkout-session: priceId directo o STRIPE_PRICE_ID."""
    return _run(event, DirectPricePricing())


__all__ = ["handler", "legacy_handler", "handle_event", "to_event_response"]

# Fin del archivo app/handlers/netlify.py
