# -*- coding: utf-8 -*-
"""
tests/handlers/test_netlify.py

Handlers por evento (Netlify Functions / Lambda proxy).

Fecha: 2026-10-19
"""

import base64
import json

import pytest

from app.handlers import netlify
from app.modules.checkout.http import CORS_HEADERS
from app.modules.checkout.pricing import CatalogPricing, DirectPricePricing
from app.shared.config.settings_checkout import CheckoutSettings
from tests.checkout_fakes import FakeProvider, SESSION_ID, SESSION_URL


@pytest.fixture
def settings() -> CheckoutSettings:
    return CheckoutSettings(
        _env_file=None,
        STRIPE_SECRET_KEY="sk_test_dummy",
        STRIPE_PRICE_ID_PDF="price_pdf",
        STRIPE_PRICE_ID_PAPERBACK="price_pb",
        STRIPE_PRICE_ID="price_legacy",
    )


def _event(method="POST", body=None, headers=None, b64=False):
    if b64 and body is not None:
        body = base64.b64encode(body.encode("utf-8")).decode("ascii")
    return {
        "httpMethod": method,
        "headers": headers or {},
        "body": body,
        "isBase64Encoded": b64,
    }


@pytest.mark.asyncio
async def test_post_event_returns_session(settings, valid_body):
    provider = FakeProvider()
    result = await netlify.handle_event(
        _event(body=json.dumps(valid_body), headers={"origin": "https://books.example"}),
        pricing=CatalogPricing(),
        settings=settings,
        provider=provider,
    )

    assert result["statusCode"] == 200
    assert json.loads(result["body"]) == {"checkout_url": SESSION_URL, "session_id": SESSION_ID}
    assert result["headers"]["Access-Control-Allow-Origin"] == "*"
    assert provider.calls[0]["line_items"] == [{"price": "price_pb", "quantity": 2}]
    assert provider.calls[0]["cancel_url"] == "https://books.example/cancel"


@pytest.mark.asyncio
async def test_base64_body_is_decoded(settings, valid_body):
    provider = FakeProvider()
    result = await netlify.handle_event(
        _event(body=json.dumps(valid_body), b64=True),
        pricing=CatalogPricing(),
        settings=settings,
        provider=provider,
    )
    assert result["statusCode"] == 200
    assert provider.calls[0]["customer_email"] == "a@b.com"


@pytest.mark.asyncio
async def test_bad_base64_is_invalid_body(settings):
    event = {"httpMethod": "POST", "body": "***", "isBase64Encoded": True}
    result = await netlify.handle_event(
        event, pricing=CatalogPricing(), settings=settings, provider=FakeProvider()
    )
    assert result["statusCode"] == 400
    assert json.loads(result["body"]) == {"error": "Invalid JSON body"}


@pytest.mark.asyncio
async def test_options_event(settings):
    provider = FakeProvider()
    result = await netlify.handle_event(
        _event("OPTIONS", body="garbage"),
        pricing=CatalogPricing(),
        settings=settings,
        provider=provider,
    )
    assert result == {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}
    assert provider.calls == []


@pytest.mark.asyncio
async def test_get_event_is_405(settings):
    result = await netlify.handle_event(
        _event("GET"), pricing=CatalogPricing(), settings=settings, provider=FakeProvider()
    )
    assert result["statusCode"] == 405
    assert json.loads(result["body"]) == {"error": "Method not allowed"}


@pytest.mark.asyncio
async def test_legacy_event_falls_back_to_default_price(settings):
    provider = FakeProvider()
    body = json.dumps({"firstName": "A", "lastName": "B", "email": "a@b.com"})
    result = await netlify.handle_event(
        _event(body=body), pricing=DirectPricePricing(), settings=settings, provider=provider
    )
    assert result["statusCode"] == 200
    assert provider.calls[0]["line_items"][0]["price"] == "price_legacy"


def test_sync_handler_uses_catalog_pricing(monkeypatch):
    seen = {}

    async def fake_handle_event(event, *, pricing, settings=None, provider=None):
        seen["variant"] = pricing.variant
        return {"statusCode": 200, "headers": {}, "body": ""}

    monkeypatch.setattr(netlify, "handle_event", fake_handle_event)

    assert netlify.handler({"httpMethod": "OPTIONS"}, None)["statusCode"] == 200
    assert seen["variant"] == "catalog"

    netlify.legacy_handler({"httpMethod": "OPTIONS"}, None)
    assert seen["variant"] == "legacy"


def test_sync_handler_converts_unexpected_errors(monkeypatch, caplog):
    async def boom(event, *, pricing, settings=None, provider=None):
        raise RuntimeError("loop exploded")

    monkeypatch.setattr(netlify, "handle_event", boom)

    result = netlify.handler({"httpMethod": "POST", "body": "{}"}, None)

    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {
        "error": "Internal server error",
        "message": "loop exploded",
    }
    assert result["headers"]["Access-Control-Allow-Methods"] == "POST, OPTIONS"
    assert any("loop exploded" in r.getMessage() for r in caplog.records)

# Fin del archivo tests/handlers/test_netlify.py
