# -*- coding: utf-8 -*-
"""
tests/shared/core/test_stripe_client_cache.py

Ciclo de vida del cliente Stripe global (transporte keep-alive).
"""

import pytest
import stripe

from app.shared.config.settings_checkout import CheckoutSettings
from app.shared.core import stripe_client_cache
from app.shared.core.resources_cache import resources


class DummyHTTPClient:
    """Sustituto de stripe.HTTPXClient: solo registra el cierre."""

    def __init__(self):
        self.closed = False

    async def close_async(self):
        self.closed = True


@pytest.fixture
def settings() -> CheckoutSettings:
    return CheckoutSettings(
        _env_file=None,
        STRIPE_SECRET_KEY="sk_test_cache",
        STRIPE_TIMEOUT_SECONDS=7,
    )


@pytest.fixture
def dummy_transport(monkeypatch):
    created = []

    def fake_build(settings=None):
        client = DummyHTTPClient()
        created.append(client)
        return client

    monkeypatch.setattr(stripe_client_cache, "build_stripe_http_client", fake_build)
    return created


def test_build_stripe_http_client_uses_httpx_transport(settings):
    http_client = stripe_client_cache.build_stripe_http_client(settings)
    assert isinstance(http_client, stripe.HTTPXClient)


def test_build_stripe_client_requires_secret_key(monkeypatch):
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    with pytest.raises(ValueError):
        stripe_client_cache.build_stripe_client(CheckoutSettings(_env_file=None))


def test_build_stripe_client(settings):
    client = stripe_client_cache.build_stripe_client(settings, http_client=DummyHTTPClient())
    assert isinstance(client, stripe.StripeClient)


@pytest.mark.asyncio
async def test_create_replaces_and_closes_previous(settings, dummy_transport):
    first = await stripe_client_cache.create_stripe_client(settings)
    second = await stripe_client_cache.create_stripe_client(settings)

    assert first is not second
    assert dummy_transport[0].closed is True
    assert resources.stripe_client is second
    assert resources.stripe_http_client is dummy_transport[1]


@pytest.mark.asyncio
async def test_create_without_secret_key_returns_none(dummy_transport, monkeypatch):
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    client = await stripe_client_cache.create_stripe_client(CheckoutSettings(_env_file=None))

    assert client is None
    assert resources.stripe_client is None
    assert dummy_transport == []


@pytest.mark.asyncio
async def test_get_stripe_client_is_lazy_and_reused(dummy_transport):
    # Usa la configuración global (STRIPE_SECRET_KEY del conftest raíz)
    client = await stripe_client_cache.get_stripe_client()
    again = await stripe_client_cache.get_stripe_client()

    assert client is again
    assert len(dummy_transport) == 1


@pytest.mark.asyncio
async def test_close_is_idempotent(settings, dummy_transport):
    await stripe_client_cache.create_stripe_client(settings)

    await stripe_client_cache.close_stripe_client()
    await stripe_client_cache.close_stripe_client()

    assert dummy_transport[0].closed is True
    assert resources.stripe_client is None
    assert resources.stripe_http_client is None

# Fin del archivo tests/shared/core/test_stripe_client_cache.py
