# -*- coding: utf-8 -*-
"""
app/shared/config/settings_checkout.py

Configuración del servicio de checkout (Stripe Checkout Sessions).

Descripción:
    Centraliza la clave secreta del proveedor, el catálogo de precios por
    tipo de producto, las tarifas de envío y los parámetros del transporte
    HTTP. Se carga una sola vez por proceso y es inmutable: el mapper de
    checkout nunca lee variables de entorno directamente.

Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class CheckoutSettings(BaseSettings):
    """Configuración de checkout leída desde entorno / .env."""

    # =========================================================================
    # APLICACIÓN
    # =========================================================================

    app_name: str = Field(default="book-checkout", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "pretty", "json"] = Field(
        default="plain", validation_alias="LOG_FORMAT"
    )

    # =========================================================================
    # STRIPE
    # =========================================================================

    stripe_secret_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias="STRIPE_SECRET_KEY",
        description="Stripe secret key (sk_live_... o sk_test_...)",
    )

    stripe_api_base: str = Field(
        default="https://api.stripe.com",
        validation_alias="STRIPE_API_BASE",
        description="URL base de la API de Stripe",
    )

    stripe_timeout_seconds: float = Field(
        default=25.0,
        gt=0,
        validation_alias="STRIPE_TIMEOUT_SECONDS",
        description="Timeout total de la llamada de creación de sesión",
    )

    # =========================================================================
    # CATÁLOGO DE PRECIOS
    # =========================================================================

    stripe_price_id_pdf: Optional[str] = Field(
        default=None, validation_alias="STRIPE_PRICE_ID_PDF"
    )
    stripe_price_id_paperback: Optional[str] = Field(
        default=None, validation_alias="STRIPE_PRICE_ID_PAPERBACK"
    )
    stripe_price_id: Optional[str] = Field(
        default=None,
        validation_alias="STRIPE_PRICE_ID",
        description="Precio por defecto de la variante legacy (priceId directo)",
    )

    # =========================================================================
    # ENVÍO (orden fijo: ground advantage, priority, priority express)
    # =========================================================================

    stripe_shipping_rate_ground_advantage: Optional[str] = Field(
        default=None, validation_alias="STRIPE_SHIPPING_RATE_GROUND_ADVANTAGE"
    )
    stripe_shipping_rate_priority: Optional[str] = Field(
        default=None, validation_alias="STRIPE_SHIPPING_RATE_PRIORITY"
    )
    stripe_shipping_rate_priority_express: Optional[str] = Field(
        default=None, validation_alias="STRIPE_SHIPPING_RATE_PRIORITY_EXPRESS"
    )

    # =========================================================================
    # REDIRECTS
    # =========================================================================

    checkout_default_origin: str = Field(
        default="https://example.com",
        validation_alias="CHECKOUT_DEFAULT_ORIGIN",
        description="Origen placeholder cuando la petición no declara Origin",
    )

    @field_validator(
        "stripe_secret_key",
        "stripe_price_id_pdf",
        "stripe_price_id_paperback",
        "stripe_price_id",
        "stripe_shipping_rate_ground_advantage",
        "stripe_shipping_rate_priority",
        "stripe_shipping_rate_priority_express",
        mode="before",
    )
    @classmethod
    def _blank_as_unset(cls, v):
        """Cadenas vacías equivalen a 'no configurado'."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("checkout_default_origin", "stripe_api_base")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @property
    def is_provider_configured(self) -> bool:
        return self.stripe_secret_key is not None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


def _warn_missing(settings: CheckoutSettings) -> None:
    if not settings.is_provider_configured:
        logger.warning("STRIPE_SECRET_KEY not configured")
    for name in ("stripe_price_id_pdf", "stripe_price_id_paperback"):
        if getattr(settings, name) is None:
            logger.warning("%s not configured", name.upper())


@lru_cache(maxsize=1)
def get_checkout_settings() -> CheckoutSettings:
    """
    Obtiene la instancia global (singleton) de configuración de checkout.

    Returns:
        CheckoutSettings: configuración inmutable del proceso.
    """
    settings = CheckoutSettings()
    _warn_missing(settings)
    return settings


__all__ = [
    "CheckoutSettings",
    "get_checkout_settings",
]
# Fin del archivo app/shared/config/settings_checkout.py
