# tests/modules/checkout/test_http.py
# -*- coding: utf-8 -*-
"""
Capa HTTP común: gate de método, CORS y decodificación del cuerpo.
"""

import json

import pytest

from app.modules.checkout.errors import InvalidRequestBodyError
from app.modules.checkout.http import (
    CORS_HEADERS,
    decode_body,
    handle_checkout_request,
    header_value,
)
from app.modules.checkout.pricing import CatalogPricing
from tests.checkout_fakes import FakeProvider, SESSION_ID, make_config


async def _handle(method, body=None, headers=None, provider=None):
    return await handle_checkout_request(
        method,
        headers or {},
        body,
        config=make_config(),
        pricing=CatalogPricing(),
        provider=provider or FakeProvider(),
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [None, "", "not json", json.dumps({"firstName": "A"})])
async def test_options_is_200_empty_with_cors(body):
    response = await _handle("OPTIONS", body)
    assert response.status_code == 200
    assert response.body == ""
    assert response.headers == CORS_HEADERS


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "HEAD"])
async def test_other_methods_are_405(method):
    provider = FakeProvider()
    response = await _handle(method, "not json", provider=provider)
    assert response.status_code == 405
    assert json.loads(response.body) == {"error": "Method not allowed"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_post_success_sets_json_and_cors(valid_body):
    response = await _handle("post", json.dumps(valid_body))
    assert response.status_code == 200
    assert json.loads(response.body)["session_id"] == SESSION_ID
    assert response.headers["Content-Type"].startswith("application/json")
    for key, value in CORS_HEADERS.items():
        assert response.headers[key] == value


@pytest.mark.asyncio
async def test_invalid_json_is_400():
    response = await _handle("POST", "{broken")
    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Invalid JSON body"}


@pytest.mark.asyncio
async def test_empty_body_is_missing_fields():
    response = await _handle("POST", b"")
    assert response.status_code == 400
    assert "Missing required fields" in json.loads(response.body)["error"]


@pytest.mark.asyncio
async def test_origin_header_drives_default_redirects(valid_body):
    provider = FakeProvider()
    await _handle("POST", json.dumps(valid_body), {"Origin": "https://shop.example"}, provider)
    assert provider.calls[0]["success_url"].startswith("https://shop.example/success?")


@pytest.mark.asyncio
async def test_form_encoded_body_is_accepted():
    provider = FakeProvider()
    body = "firstName=A&lastName=B&email=a%40b.com&productType=pdf&quantity=3"
    response = await _handle(
        "POST",
        body,
        {"content-type": "application/x-www-form-urlencoded; charset=utf-8"},
        provider,
    )
    assert response.status_code == 200
    assert provider.calls[0]["line_items"][0]["quantity"] == 3
    assert provider.calls[0]["customer_email"] == "a@b.com"


@pytest.mark.parametrize("raw", ["[1, 2]", '"text"', "42", b"\xff\xfe"])
def test_decode_body_rejects_non_objects(raw):
    with pytest.raises(InvalidRequestBodyError):
        decode_body(raw)


def test_header_value_is_case_insensitive():
    headers = {"ORIGIN": "https://a.example", "Content-Type": "application/json"}
    assert header_value(headers, "origin") == "https://a.example"
    assert header_value(headers, "content-type") == "application/json"
    assert header_value(headers, "x-missing") is None
    assert header_value(None, "origin") is None

# Fin del archivo tests/modules/checkout/test_http.py
