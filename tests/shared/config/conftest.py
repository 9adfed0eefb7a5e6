# -*- coding: utf-8 -*-
"""
tests/shared/config/conftest.py

Aísla variables de entorno y el caché de get_checkout_settings() por test.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    # No heredar STRIPE_* / CHECKOUT_* del conftest raíz ni del shell del dev
    for k in list(os.environ.keys()):
        if k.startswith(("STRIPE_", "CHECKOUT_", "APP_", "LOG_")):
            monkeypatch.delenv(k, raising=False)

    from app.shared.config.settings_checkout import get_checkout_settings

    get_checkout_settings.cache_clear()
    yield
    get_checkout_settings.cache_clear()

# Fin del archivo tests/shared/config/conftest.py
