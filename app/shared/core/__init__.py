# -*- coding: utf-8 -*-
"""
app/shared/core/__init__.py

Recursos de proceso: cliente Stripe con transporte keep-alive.
"""

from .resources_cache import GlobalResources, resources
from .stripe_client_cache import (
    build_stripe_client,
    build_stripe_http_client,
    close_stripe_client,
    create_stripe_client,
    get_stripe_client,
)

__all__ = [
    "GlobalResources",
    "resources",
    "build_stripe_client",
    "build_stripe_http_client",
    "create_stripe_client",
    "get_stripe_client",
    "close_stripe_client",
]

# Fin del archivo app/shared/core/__init__.py
