# -*- coding: utf-8 -*-
"""
app/modules/checkout/enums.py

Enums del módulo de checkout: tipos de producto vendibles y
niveles de tarifa de envío (en su orden fijo de presentación).

Fecha: 2026-10-19
"""

from enum import StrEnum


class ProductType(StrEnum):
    """Formato del libro a comprar."""

    PDF = "pdf"
    PAPERBACK = "paperback"

    @property
    def requires_shipping(self) -> bool:
        return self is ProductType.PAPERBACK


class ShippingTier(StrEnum):
    """Tarifas de envío USPS configurables; el orden de declaración es el orden enviado."""

    GROUND_ADVANTAGE = "ground_advantage"
    PRIORITY = "priority"
    PRIORITY_EXPRESS = "priority_express"


__all__ = ["ProductType", "ShippingTier"]

# Fin del archivo app/modules/checkout/enums.py
