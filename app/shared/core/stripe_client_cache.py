# -*- coding: utf-8 -*-
"""
app/shared/core/stripe_client_cache.py

Gestión del cliente Stripe global compartido.

El StripeClient usa stripe.HTTPXClient (httpx.AsyncClient interno) como
transporte keep-alive. El pool se reutiliza entre peticiones solo como
optimización: cuando el runtime no mantiene un event loop vivo entre
invocaciones (funciones serverless por evento) se construye un cliente
nuevo con build_stripe_client() y se cierra al terminar.

Sin reintentos: max_network_retries=0, un solo intento por petición.

Fecha: 2026-10-19
"""

from __future__ import annotations
import asyncio
import logging
from typing import Optional

import stripe

from app.shared.config.settings_checkout import CheckoutSettings, get_checkout_settings
from .resources_cache import resources

logger = logging.getLogger(__name__)

# Lock async para evitar creación concurrente del cliente
_stripe_client_lock = asyncio.Lock()


def build_stripe_http_client(settings: Optional[CheckoutSettings] = None) -> stripe.HTTPClient:
    """Transporte async del SDK con el timeout configurado."""
    settings = settings or get_checkout_settings()
    return stripe.HTTPXClient(timeout=settings.stripe_timeout_seconds)


def build_stripe_client(
    settings: Optional[CheckoutSettings] = None,
    http_client: Optional[stripe.HTTPClient] = None,
) -> stripe.StripeClient:
    """
    Construye un StripeClient para el checkout.

    Raises:
        ValueError: STRIPE_SECRET_KEY no configurada.
    """
    settings = settings or get_checkout_settings()
    if settings.stripe_secret_key is None:
        raise ValueError("Stripe is not configured. Set STRIPE_SECRET_KEY.")

    return stripe.StripeClient(
        settings.stripe_secret_key.get_secret_value(),
        http_client=http_client or build_stripe_http_client(settings),
        max_network_retries=0,
        base_addresses={"api": settings.stripe_api_base},
    )


async def _close_current() -> None:
    if resources.stripe_http_client is not None:
        await resources.stripe_http_client.close_async()
    resources.stripe_http_client = None
    resources.stripe_client = None


async def create_stripe_client(
    settings: Optional[CheckoutSettings] = None,
) -> Optional[stripe.StripeClient]:
    """
    Crea (o recrea) el cliente Stripe global compartido.

    Devuelve None si falta la clave secreta: el checkout responde 500
    "payment provider not configured" sin tocar la red.
    """
    settings = settings or get_checkout_settings()
    async with _stripe_client_lock:
        # Cerrar cliente previo si existe (prevención de fugas en re-init/tests)
        await _close_current()

        if not settings.is_provider_configured:
            logger.warning("Stripe client not created: STRIPE_SECRET_KEY not configured")
            return None

        http_client = build_stripe_http_client(settings)
        resources.stripe_http_client = http_client
        resources.stripe_client = build_stripe_client(settings, http_client=http_client)
        logger.info("Global Stripe client initialised")
        return resources.stripe_client


async def get_stripe_client() -> stripe.StripeClient:
    """
    Obtiene el cliente Stripe global. Si no existe, lo crea.

    Raises:
        ValueError: STRIPE_SECRET_KEY no configurada.
    """
    client = resources.stripe_client
    if client is None:
        logger.info("Stripe client not initialised, creating...")
        client = await create_stripe_client()
    if client is None:
        raise ValueError("Stripe is not configured. Set STRIPE_SECRET_KEY.")
    return client


async def close_stripe_client() -> None:
    """Cierra el cliente global; seguro de llamar varias veces."""
    async with _stripe_client_lock:
        if resources.stripe_client is not None:
            await _close_current()
            logger.info("Global Stripe client closed")


__all__ = [
    "build_stripe_client",
    "build_stripe_http_client",
    "create_stripe_client",
    "get_stripe_client",
    "close_stripe_client",
]

# Fin del archivo app/shared/core/stripe_client_cache.py
