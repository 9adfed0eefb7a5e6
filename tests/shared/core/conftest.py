# -*- coding: utf-8 -*-
# conftest.py: estado limpio del cliente Stripe global por test

import pytest


@pytest.fixture(autouse=True)
def _reset_global_stripe_client():
    from app.shared.core.resources_cache import resources

    resources.stripe_client = None
    resources.stripe_http_client = None
    yield
    resources.stripe_client = None
    resources.stripe_http_client = None
