# -*- coding: utf-8 -*-
"""
app/modules/checkout/payload.py

Construcción del payload de creación de Checkout Session.

El resultado es un dict anidado con la semántica de la API de Stripe
(`checkout.sessions.create_async(params=payload)` del SDK).

Reglas:
- quantity ausente o "falsy" -> 1.
- metadata siempre replica los campos lógicos de la petición.
- success/cancel por defecto = origin (o placeholder) + ruta fija; la
  ruta de éxito lleva el token {CHECKOUT_SESSION_ID} literal, Stripe lo
  sustituye.
- Solo paperback lleva shipping_address_collection/shipping_options, y
  shipping_options solo incluye tarifas configuradas, en orden fijo.

Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .catalog import SHIPPING_COUNTRIES, CheckoutConfig
from .errors import InvalidQuantityError
from .pricing import ResolvedPrice
from .schemas import CheckoutRequest

SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"
SUCCESS_PATH = f"/success?session_id={SESSION_ID_PLACEHOLDER}"
CANCEL_PATH = "/cancel"


def normalize_quantity(raw: Any) -> int:
    """
    Normaliza la cantidad pedida.

    Valores "falsy" (None, 0, "", "0") equivalen a 1. Cualquier otra cosa
    debe ser un entero positivo (también se aceptan strings numéricos,
    p. ej. desde formularios).
    """
    if isinstance(raw, bool):
        raise InvalidQuantityError()
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 1
        try:
            raw = int(raw)
        except ValueError:
            raise InvalidQuantityError() from None
    if isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidQuantityError()
        raw = int(raw)
    if not raw:
        return 1
    if not isinstance(raw, int) or raw < 0:
        raise InvalidQuantityError()
    return raw


def default_redirect_urls(origin: Optional[str], fallback_origin: str) -> Tuple[str, str]:
    base = (origin or fallback_origin).rstrip("/")
    return f"{base}{SUCCESS_PATH}", f"{base}{CANCEL_PATH}"


def build_metadata(
    request: CheckoutRequest, price: ResolvedPrice, quantity: int
) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {
        "firstName": request.first_name,
        "lastName": request.last_name,
        "email": request.email,
    }
    if price.product_type is not None:
        metadata["productType"] = price.product_type.value
    metadata["quantity"] = quantity
    return metadata


def build_session_payload(
    request: CheckoutRequest,
    *,
    price: ResolvedPrice,
    quantity: int,
    config: CheckoutConfig,
    origin: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Arma el payload de sesión para una petición ya validada.

    Misma petición + misma configuración -> mismo payload (sin estado,
    sin timestamps ni ids generados localmente).
    """
    default_success, default_cancel = default_redirect_urls(origin, config.default_origin)

    payload: Dict[str, Any] = {
        "payment_method_types": ["card"],
        "line_items": [
            {
                "price": price.price_id,
                "quantity": quantity,
            }
        ],
        "mode": "payment",
        "success_url": request.success_url or default_success,
        "cancel_url": request.cancel_url or default_cancel,
        "customer_email": request.email,
        "metadata": build_metadata(request, price, quantity),
        "customer_creation": "always",
        "billing_address_collection": "auto",
    }

    if price.product_type is not None and price.product_type.requires_shipping:
        payload["shipping_address_collection"] = {
            "allowed_countries": list(SHIPPING_COUNTRIES),
        }
        rates = config.shipping_rates.configured()
        if rates:
            payload["shipping_options"] = [{"shipping_rate": rate} for rate in rates]

    return payload


__all__ = [
    "CANCEL_PATH",
    "SESSION_ID_PLACEHOLDER",
    "SUCCESS_PATH",
    "build_metadata",
    "build_session_payload",
    "default_redirect_urls",
    "normalize_quantity",
]

# Fin del archivo app/modules/checkout/payload.py
