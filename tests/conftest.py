# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del servicio de checkout.

- Variables de entorno mínimas ANTES de importar la app (settings es singleton).
- Configuración de checkout y proveedor falso inyectables.
- Cliente httpx asíncrono contra la app con ASGITransport + asgi-lifespan.
"""

import os
import pathlib
import sys
from collections.abc import AsyncIterator
from typing import Any, Dict

import pytest
import pytest_asyncio

# -----------------------------------------------------------------------------
# 0) Defaults de entorno (evita llamadas reales a Stripe)
# -----------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "production")  # no sobreescribir con .env local
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")
os.environ.setdefault("STRIPE_PRICE_ID_PDF", "price_env_pdf")
os.environ.setdefault("STRIPE_PRICE_ID_PAPERBACK", "price_env_paperback")
os.environ.setdefault("STRIPE_API_BASE", "https://stripe.invalid")

# -----------------------------------------------------------------------------
# 1) Asegura la raíz del repo en sys.path
# -----------------------------------------------------------------------------
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager

from app.modules.checkout.catalog import CheckoutConfig
from tests.checkout_fakes import FakeProvider, make_config


@pytest.fixture
def checkout_config() -> CheckoutConfig:
    return make_config()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def valid_body() -> Dict[str, Any]:
    return {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "productType": "paperback",
        "quantity": 2,
    }


# -----------------------------------------------------------------------------
# 2) App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture(scope="session")
def app():
    """Carga la app **después** de setear env vars."""
    from app.main import app as fastapi_app
    return fastapi_app


@pytest_asyncio.fixture
async def async_client(app, checkout_config, fake_provider) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app, con config y proveedor
    sustituidos vía dependency_overrides.
    """
    from app.modules.checkout.routes import get_checkout_config, get_checkout_provider

    app.dependency_overrides[get_checkout_config] = lambda: checkout_config
    app.dependency_overrides[get_checkout_provider] = lambda: fake_provider
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    # Permite usar @pytest.mark.anyio en tests async
    return "asyncio"

# Fin del archivo tests/conftest.py
