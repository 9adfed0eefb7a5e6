# -*- coding: utf-8 -*-
"""
app/core/settings.py

Fachada de configuración: reexpone la carga de settings (Pydantic v2)
definida en `app.shared.config.settings_checkout`.
"""

from app.shared.config.settings_checkout import CheckoutSettings, get_checkout_settings


def get_settings() -> CheckoutSettings:
    """
    Devuelve la configuración global de la aplicación (singleton).

    Returns:
        CheckoutSettings: instancia inmutable de configuración.
    """
    return get_checkout_settings()

# Fin del archivo app/core/settings.py
