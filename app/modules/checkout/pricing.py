# -*- coding: utf-8 -*-
"""
app/modules/checkout/pricing.py

Estrategias de resolución de precio.

Cada variante del endpoint usa exactamente una estrategia:
- CatalogPricing: productType (pdf | paperback) -> price id del catálogo.
- DirectPricePricing (legacy): priceId enviado por el cliente, con
  fallback al precio por defecto configurado.

Una estrategia define además qué campos son obligatorios y con qué
mensaje se rechaza la petición cuando falta alguno.

Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .catalog import CheckoutConfig
from .enums import ProductType
from .errors import (
    LEGACY_MISSING_FIELDS_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    MissingFieldsError,
    PriceResolutionError,
)
from .schemas import CheckoutRequest


@dataclass(frozen=True)
class ResolvedPrice:
    price_id: str
    product_type: Optional[ProductType] = None


class PricingStrategy(Protocol):
    """Capacidad: resolver el price id de una petición o fallar con 400."""

    variant: str
    required_fields: Tuple[str, ...]
    missing_fields_message: str

    def resolve_price(
        self, request: CheckoutRequest, config: CheckoutConfig
    ) -> ResolvedPrice:
        ...


def validate_required_fields(request: CheckoutRequest, strategy: PricingStrategy) -> None:
    """Todos los campos requeridos deben venir con valor (no vacío)."""
    if not all(getattr(request, name) for name in strategy.required_fields):
        raise MissingFieldsError(strategy.missing_fields_message)


class CatalogPricing:
    variant = "catalog"
    required_fields = ("first_name", "last_name", "email", "product_type")
    missing_fields_message = MISSING_FIELDS_MESSAGE

    def resolve_price(
        self, request: CheckoutRequest, config: CheckoutConfig
    ) -> ResolvedPrice:
        try:
            product_type = ProductType(request.product_type)
        except ValueError:
            raise PriceResolutionError() from None

        price_id = config.catalog.price_for(product_type)
        if not price_id:
            raise PriceResolutionError()
        return ResolvedPrice(price_id=price_id, product_type=product_type)


class DirectPricePricing:
    variant = "legacy"
    required_fields = ("first_name", "last_name", "email")
    missing_fields_message = LEGACY_MISSING_FIELDS_MESSAGE

    def resolve_price(
        self, request: CheckoutRequest, config: CheckoutConfig
    ) -> ResolvedPrice:
        # El priceId explícito del cliente tiene prioridad sobre el configurado
        price_id = request.price_id or config.default_price_id
        if not price_id:
            raise PriceResolutionError()
        return ResolvedPrice(price_id=price_id)


__all__ = [
    "CatalogPricing",
    "DirectPricePricing",
    "PricingStrategy",
    "ResolvedPrice",
    "validate_required_fields",
]

# Fin del archivo app/modules/checkout/pricing.py
