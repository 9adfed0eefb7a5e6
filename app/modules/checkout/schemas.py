# -*- coding: utf-8 -*-
"""
app/modules/checkout/schemas.py

Modelos de entrada/salida del checkout.

- CheckoutRequest: petición del frontend (controlada por el cliente).
  El parseo es tolerante: los campos ausentes o no escalares quedan en
  None y las reglas de negocio (campos requeridos, precio, cantidad) se
  aplican después, en pricing/service, con mensajes fijos.
- ProviderSession: subconjunto de la respuesta de Stripe que usamos.
- CheckoutResult / ErrorBody: cuerpos de respuesta hacia el cliente.

Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _scalar_or_none(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


class CheckoutRequest(BaseModel):
    """Payload de entrada para crear una sesión de checkout."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    product_type: Optional[str] = Field(default=None, alias="productType")
    price_id: Optional[str] = Field(default=None, alias="priceId")
    quantity: Any = None
    success_url: Optional[str] = Field(default=None, alias="successUrl")
    cancel_url: Optional[str] = Field(default=None, alias="cancelUrl")

    @field_validator(
        "first_name",
        "last_name",
        "email",
        "product_type",
        "price_id",
        "success_url",
        "cancel_url",
        mode="before",
    )
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Optional[str]:
        return _scalar_or_none(value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CheckoutRequest":
        return cls.model_validate(dict(data))


class ProviderSession(BaseModel):
    """Sesión creada por el proveedor (solo los campos que consumimos)."""

    model_config = ConfigDict(extra="ignore")

    id: str
    url: Optional[str] = None


class CheckoutResult(BaseModel):
    """Respuesta exitosa hacia el frontend."""

    checkout_url: Optional[str]
    session_id: str


class ErrorBody(BaseModel):
    """Cuerpo de error normalizado."""

    error: str
    message: Optional[str] = None


__all__ = [
    "CheckoutRequest",
    "CheckoutResult",
    "ErrorBody",
    "ProviderSession",
]

# Fin del archivo app/modules/checkout/schemas.py
