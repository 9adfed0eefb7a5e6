# -*- coding: utf-8 -*-
"""
app/modules/checkout/errors.py

Taxonomía de errores del flujo de checkout.

Cada error conoce su código HTTP y el cuerpo JSON que se devuelve al
cliente ({error, message?}). Los errores de validación usan mensajes
estáticos: nunca exponen detalle interno.

Fecha: 2026-10-19
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: firstName, lastName, email, and productType are required"
)
LEGACY_MISSING_FIELDS_MESSAGE = (
    "Missing required fields: firstName, lastName, and email are required"
)
INVALID_PRICE_MESSAGE = "Invalid product type or price not configured"
INVALID_BODY_MESSAGE = "Invalid JSON body"
INVALID_QUANTITY_MESSAGE = "Quantity must be a positive integer"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
PROVIDER_ERROR_MESSAGE = "Stripe API error"
INTERNAL_ERROR_MESSAGE = "Internal server error"
UNKNOWN_PROVIDER_MESSAGE = "Unknown error"


class CheckoutError(Exception):
    """Error base del checkout con su representación HTTP."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    kind: str = "internal_error"

    def __init__(self, error: str, message: Optional[str] = None):
        super().__init__(error if message is None else f"{error}: {message}")
        self.error = error
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


class MethodNotAllowedError(CheckoutError):
    status_code = HTTPStatus.METHOD_NOT_ALLOWED
    kind = "method_not_allowed"

    def __init__(self) -> None:
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE)


class CheckoutValidationError(CheckoutError):
    """Error de validación de la petición entrante (400)."""

    status_code = HTTPStatus.BAD_REQUEST
    kind = "validation_error"


class InvalidRequestBodyError(CheckoutValidationError):
    def __init__(self) -> None:
        super().__init__(INVALID_BODY_MESSAGE)


class MissingFieldsError(CheckoutValidationError):
    def __init__(self, message: str = MISSING_FIELDS_MESSAGE) -> None:
        super().__init__(message)


class PriceResolutionError(CheckoutValidationError):
    def __init__(self) -> None:
        super().__init__(INVALID_PRICE_MESSAGE)


class InvalidQuantityError(CheckoutValidationError):
    def __init__(self) -> None:
        super().__init__(INVALID_QUANTITY_MESSAGE)


class ProviderError(CheckoutError):
    """
    El proveedor respondió con un status no exitoso.

    El status reportado se refleja tal cual; si no es un código de error
    utilizable se mapea a 502.
    """

    kind = "provider_error"

    def __init__(self, provider_status: Optional[int], message: Optional[str] = None):
        super().__init__(PROVIDER_ERROR_MESSAGE, message or UNKNOWN_PROVIDER_MESSAGE)
        self.provider_status = provider_status
        if provider_status is not None and 400 <= provider_status <= 599:
            self.status_code = provider_status
        else:
            self.status_code = HTTPStatus.BAD_GATEWAY


class ProviderNotConfiguredError(CheckoutError):
    """Falta la clave secreta: se trata como fallo interno (500)."""

    def __init__(self) -> None:
        super().__init__(INTERNAL_ERROR_MESSAGE, "payment provider not configured")


def internal_error_body(exc: BaseException) -> Dict[str, Any]:
    """Cuerpo 500 genérico con el texto del error para diagnóstico del operador."""
    return {"error": INTERNAL_ERROR_MESSAGE, "message": str(exc) or type(exc).__name__}


__all__ = [
    "CheckoutError",
    "CheckoutValidationError",
    "InvalidQuantityError",
    "InvalidRequestBodyError",
    "MethodNotAllowedError",
    "MissingFieldsError",
    "PriceResolutionError",
    "ProviderError",
    "ProviderNotConfiguredError",
    "internal_error_body",
    "MISSING_FIELDS_MESSAGE",
    "LEGACY_MISSING_FIELDS_MESSAGE",
    "INVALID_PRICE_MESSAGE",
    "INVALID_BODY_MESSAGE",
    "INVALID_QUANTITY_MESSAGE",
    "METHOD_NOT_ALLOWED_MESSAGE",
    "PROVIDER_ERROR_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
]

# Fin del archivo app/modules/checkout/errors.py
