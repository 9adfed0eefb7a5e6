# -*- coding: utf-8 -*-
"""
app/modules/checkout/__init__.py

Módulo de checkout: valida la petición del frontend, resuelve el precio,
arma el payload de Stripe Checkout y crea la sesión.

Fecha: 2026-10-19
"""

from .catalog import CheckoutConfig, PriceCatalog, ShippingRates
from .enums import ProductType, ShippingTier
from .http import HandlerResponse, handle_checkout_request
from .pricing import CatalogPricing, DirectPricePricing, PricingStrategy
from .provider import StripeCheckoutClient
from .schemas import CheckoutRequest, CheckoutResult
from .service import CheckoutResponse, create_checkout_session, prepare_session_payload

__all__ = [
    "CatalogPricing",
    "CheckoutConfig",
    "CheckoutRequest",
    "CheckoutResponse",
    "CheckoutResult",
    "DirectPricePricing",
    "HandlerResponse",
    "PriceCatalog",
    "PricingStrategy",
    "ProductType",
    "ShippingRates",
    "ShippingTier",
    "StripeCheckoutClient",
    "create_checkout_session",
    "handle_checkout_request",
    "prepare_session_payload",
]

# Fin del archivo app/modules/checkout/__init__.py
