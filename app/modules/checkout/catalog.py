# -*- coding: utf-8 -*-
"""
app/modules/checkout/catalog.py

Configuración inmutable que consume el mapper de checkout.

Se construye una sola vez a partir de CheckoutSettings y se pasa
explícitamente a las funciones de pricing/payload; ninguna de ellas
lee el entorno.

Fecha: 2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from app.shared.config.settings_checkout import CheckoutSettings
from .enums import ProductType, ShippingTier

# Lista fija de países de envío (no configurable)
SHIPPING_COUNTRIES: Tuple[str, ...] = ("US", "CA", "GB")
DEFAULT_ORIGIN = "https://example.com"


@dataclass(frozen=True)
class PriceCatalog:
    """Mapa tipo de producto -> price id de Stripe (None = no configurado)."""

    prices: Mapping[ProductType, Optional[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def price_for(self, product_type: ProductType) -> Optional[str]:
        return self.prices.get(product_type) or None


@dataclass(frozen=True)
class ShippingRates:
    """Tarifas de envío configuradas, indexadas por nivel."""

    rates: Mapping[ShippingTier, Optional[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def configured(self) -> Tuple[str, ...]:
        """Rate ids presentes, en el orden fijo de ShippingTier."""
        return tuple(
            rate for tier in ShippingTier if (rate := self.rates.get(tier))
        )


@dataclass(frozen=True)
class CheckoutConfig:
    """Todo lo que el mapper necesita saber del entorno."""

    catalog: PriceCatalog = field(default_factory=PriceCatalog)
    shipping_rates: ShippingRates = field(default_factory=ShippingRates)
    default_price_id: Optional[str] = None
    default_origin: str = DEFAULT_ORIGIN

    @classmethod
    def from_settings(cls, settings: CheckoutSettings) -> "CheckoutConfig":
        return cls(
            catalog=PriceCatalog(
                {
                    ProductType.PDF: settings.stripe_price_id_pdf,
                    ProductType.PAPERBACK: settings.stripe_price_id_paperback,
                }
            ),
            shipping_rates=ShippingRates(
                {
                    ShippingTier.GROUND_ADVANTAGE: settings.stripe_shipping_rate_ground_advantage,
                    ShippingTier.PRIORITY: settings.stripe_shipping_rate_priority,
                    ShippingTier.PRIORITY_EXPRESS: settings.stripe_shipping_rate_priority_express,
                }
            ),
            default_price_id=settings.stripe_price_id,
            default_origin=settings.checkout_default_origin or DEFAULT_ORIGIN,
        )


__all__ = [
    "CheckoutConfig",
    "PriceCatalog",
    "ShippingRates",
    "SHIPPING_COUNTRIES",
    "DEFAULT_ORIGIN",
]

# Fin del archivo app/modules/checkout/catalog.py
