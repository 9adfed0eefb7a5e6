# -*- coding: utf-8 -*-
"""
app/modules/checkout/metrics.py

Métricas Prometheus del checkout: resultado por variante y latencia
de la llamada a Stripe.

Se exponen por el endpoint /metrics de app.observability.prom.

Fecha: 2026-10-19
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

CHECKOUT_SESSIONS = Counter(
    "checkout_sessions_total",
    "Checkout session requests by variant and outcome",
    ["variant", "outcome"],
)
PROVIDER_LATENCY = Histogram(
    "checkout_provider_latency_seconds",
    "Latency of the Stripe session-creation call (s)",
    ["variant"],
)


def record_outcome(variant: str, outcome: str) -> None:
    CHECKOUT_SESSIONS.labels(variant, outcome).inc()


__all__ = ["CHECKOUT_SESSIONS", "PROVIDER_LATENCY", "record_outcome"]

# Fin del archivo app/modules/checkout/metrics.py
