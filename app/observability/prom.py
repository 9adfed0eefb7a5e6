# -*- coding: utf-8 -*-
"""
app/observability/prom.py

Observabilidad Prometheus del servicio de checkout.

- Middleware HTTP: conteo y latencia por método / plantilla de ruta / status.
  La etiqueta de ruta es la plantilla registrada (no la URL cruda) para
  acotar la cardinalidad; peticiones sin ruta caen en "unmatched".
- Endpoint /metrics (pull model), con MultiProcessCollector si
  PROMETHEUS_MULTIPROC_DIR está definido (uvicorn con varios workers).

Las métricas de dominio (sesiones creadas, latencia de Stripe) viven en
app.modules.checkout.metrics y se exponen por el mismo endpoint.

Fecha: 2026-10-19
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
    Counter, Histogram,
)

METRICS_PATH = "/metrics"
UNMATCHED_PATH = "unmatched"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
)


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_PATH


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Instrumenta cada petición salvo el propio scrape de /metrics."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        labels = (request.method, _route_template(request), str(resp.status_code))
        REQUEST_LATENCY.labels(*labels).observe(elapsed)
        REQUEST_COUNT.labels(*labels).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = METRICS_PATH) -> None:
    """Registra el endpoint de scrape en la app."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics() -> Response:
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = ["PrometheusMiddleware", "mount_metrics", "setup_observability"]

# Fin del archivo app/observability/prom.py
