# -*- coding: utf-8 -*-
"""
app/shared/core/resources_cache.py

Contenedor singleton de recursos globales compartidos por invocación.
Hoy solo mantiene el cliente Stripe y su transporte HTTP keep-alive.

Fecha: 2026-10-19
"""

from __future__ import annotations
from typing import Optional

import stripe


class GlobalResources:
    """Contenedor de recursos globales compartidos (instancia única por proceso)."""

    def __init__(self) -> None:
        self.stripe_http_client: Optional[stripe.HTTPClient] = None
        self.stripe_client: Optional[stripe.StripeClient] = None


# Instancia singleton de recursos globales
resources = GlobalResources()


# Fin del archivo app/shared/core/resources_cache.py
