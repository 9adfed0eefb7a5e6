# -*- coding: utf-8 -*-
"""
app/modules/checkout/service.py

Fachada de alto nivel: crear una sesión de checkout.

Orquesta, en orden y con corto-circuito en cada paso:
1) Validación de campos requeridos (según la estrategia de pricing)
2) Resolución de precio (catálogo o priceId directo)
3) Normalización de cantidad y armado del payload (incl. envío)
4) Llamada única a Stripe (sin reintentos)
5) Traducción del resultado a CheckoutResponse (status + cuerpo)

Ningún error escapa: todo termina en una respuesta estructurada.

Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from .catalog import CheckoutConfig
from .errors import CheckoutError, internal_error_body
from .metrics import PROVIDER_LATENCY, record_outcome
from .payload import build_session_payload, normalize_quantity
from .pricing import PricingStrategy, validate_required_fields
from .schemas import CheckoutRequest, CheckoutResult, ProviderSession

logger = logging.getLogger(__name__)


class CheckoutProvider(Protocol):
    async def create_session(self, payload: Dict[str, Any]) -> ProviderSession:
        ...


@dataclass(frozen=True)
class CheckoutResponse:
    status_code: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status_code == 200


def prepare_session_payload(
    request: CheckoutRequest,
    *,
    config: CheckoutConfig,
    pricing: PricingStrategy,
    origin: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Pasos locales (sin red): valida, resuelve precio y arma el payload.

    Raises:
        CheckoutValidationError: petición inválida (400).
    """
    validate_required_fields(request, pricing)
    price = pricing.resolve_price(request, config)
    quantity = normalize_quantity(request.quantity)
    return build_session_payload(
        request,
        price=price,
        quantity=quantity,
        config=config,
        origin=origin,
    )


async def create_checkout_session(
    request: CheckoutRequest,
    *,
    config: CheckoutConfig,
    pricing: PricingStrategy,
    provider: CheckoutProvider,
    origin: Optional[str] = None,
) -> CheckoutResponse:
    """
    Crea una Checkout Session y devuelve la respuesta normalizada.

    - 200 {checkout_url, session_id}
    - 400 validación, status de Stripe en error de proveedor
    - 500 {error, message} ante cualquier otro fallo (logueado)
    """
    variant = pricing.variant
    try:
        payload = prepare_session_payload(
            request, config=config, pricing=pricing, origin=origin
        )

        started = time.perf_counter()
        try:
            session = await provider.create_session(payload)
        finally:
            PROVIDER_LATENCY.labels(variant).observe(time.perf_counter() - started)

    except CheckoutError as exc:
        if exc.status_code >= 500 and exc.kind == "internal_error":
            logger.error("Error creating checkout session: %s", exc)
        else:
            logger.warning("Checkout rejected (%s): %s", exc.kind, exc.error)
        record_outcome(variant, exc.kind)
        return CheckoutResponse(status_code=int(exc.status_code), body=exc.to_body())

    except Exception as exc:
        logger.exception("Error creating checkout session: %s", exc)
        record_outcome(variant, "internal_error")
        return CheckoutResponse(status_code=500, body=internal_error_body(exc))

    logger.info(
        "Checkout session created: session_id=%s variant=%s product=%s quantity=%s",
        session.id,
        variant,
        payload["metadata"].get("productType"),
        payload["line_items"][0]["quantity"],
    )
    record_outcome(variant, "created")
    result = CheckoutResult(checkout_url=session.url, session_id=session.id)
    return CheckoutResponse(status_code=200, body=result.model_dump())


__all__ = [
    "CheckoutProvider",
    "CheckoutResponse",
    "create_checkout_session",
    "prepare_session_payload",
]

# Fin del archivo app/modules/checkout/service.py
