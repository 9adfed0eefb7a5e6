# -*- coding: utf-8 -*-
"""
app/routes/health_routes.py

Endpoint básico de health check del servicio de checkout.

Fecha: 2026-10-19
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.shared.config.settings_checkout import get_checkout_settings

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del servicio",
    description=(
        "Devuelve el estado básico del servicio, incluyendo si la clave de "
        "Stripe y los precios del catálogo están configurados."
    ),
)
async def health_check() -> dict:
    """
    Health check básico.

    No expone valores de configuración, solo si están presentes.
    """
    settings = get_checkout_settings()

    prices_ok = bool(settings.stripe_price_id_pdf and settings.stripe_price_id_paperback)
    provider_ok = settings.is_provider_configured

    return {
        "status": "ok" if (prices_ok and provider_ok) else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checkout": {
            "provider_configured": provider_ok,
            "catalog_configured": prices_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo app/routes/health_routes.py
