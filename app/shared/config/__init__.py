# -*- coding: utf-8 -*-
"""
app/shared/config/__init__.py

Entry-point ligero para configuración.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

from .logging_config import setup_logging
from .settings_checkout import CheckoutSettings, get_checkout_settings

__all__ = ["CheckoutSettings", "get_checkout_settings", "setup_logging"]

# Fin del archivo app/shared/config/__init__.py
