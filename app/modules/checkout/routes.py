# -*- coding: utf-8 -*-
"""
app/modules/checkout/routes.py

Rutas ASGI de creación de sesiones de checkout.

Endpoints:
- /api/create-checkout          -> pricing por catálogo (productType)
- /api/create-checkout-session  -> pricing legacy (priceId directo)

Cada ruta registra los métodos HTTP estándar y delega el gate
(OPTIONS/POST/405) en handle_checkout_request, para que la respuesta sea
idéntica a la de los handlers por evento. Los métodos que el router no
conoce (TRACE, PROPFIND, ...) los rechaza Starlette con un 405 propio;
method_not_allowed_handler lo reescribe con el mismo cuerpo y CORS.

Fecha: 2026-10-19
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.shared.config.settings_checkout import get_checkout_settings
from .catalog import CheckoutConfig
from .errors import MethodNotAllowedError
from .http import HandlerResponse, handle_checkout_request, json_response
from .pricing import CatalogPricing, DirectPricePricing, PricingStrategy
from .provider import StripeCheckoutClient
from .service import CheckoutProvider

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

CATALOG_PRICING = CatalogPricing()
LEGACY_PRICING = DirectPricePricing()


@lru_cache(maxsize=1)
def get_checkout_config() -> CheckoutConfig:
    """Configuración del mapper, construida una vez por proceso."""
    return CheckoutConfig.from_settings(get_checkout_settings())


def get_checkout_provider() -> CheckoutProvider:
    """Cliente de checkout sobre el StripeClient global."""
    return StripeCheckoutClient.from_settings(get_checkout_settings())


router = APIRouter(
    prefix="/api",
    tags=["checkout"],
)


def _to_response(result: HandlerResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


async def _dispatch(
    request: Request,
    *,
    pricing: PricingStrategy,
    config: CheckoutConfig,
    provider: CheckoutProvider,
) -> Response:
    # El cuerpo solo se lee para POST: el gate de método va primero
    body = await request.body() if request.method.upper() == "POST" else b""
    result = await handle_checkout_request(
        request.method,
        request.headers,
        body,
        config=config,
        pricing=pricing,
        provider=provider,
    )
    return _to_response(result)


@router.api_route("/create-checkout", methods=ALL_METHODS, include_in_schema=True)
async def create_checkout(
    request: Request,
    config: CheckoutConfig = Depends(get_checkout_config),
    provider: CheckoutProvider = Depends(get_checkout_provider),
) -> Response:
    """Crea una sesión de checkout para un libro (pdf | paperback)."""
    return await _dispatch(request, pricing=CATALOG_PRICING, config=config, provider=provider)


@router.api_route("/create-checkout-session", methods=ALL_METHODS, include_in_schema=True)
async def create_checkout_legacy(
    request: Request,
    config: CheckoutConfig = Depends(get_checkout_config),
    provider: CheckoutProvider = Depends(get_checkout_provider),
) -> Response:
    """Variante legacy: el cliente envía priceId (o se usa STRIPE_PRICE_ID)."""
    return await _dispatch(request, pricing=LEGACY_PRICING, config=config, provider=provider)


async def method_not_allowed_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """405 de Starlette -> mismo cuerpo y cabeceras CORS que el gate de checkout."""
    error = MethodNotAllowedError()
    return _to_response(json_response(int(error.status_code), error.to_body()))


__all__ = [
    "router",
    "method_not_allowed_handler",
    "get_checkout_config",
    "get_checkout_provider",
    "CATALOG_PRICING",
    "LEGACY_PRICING",
]

# Fin del archivo app/modules/checkout/routes.py
