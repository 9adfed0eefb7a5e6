# -*- coding: utf-8 -*-
"""
app/main.py

Punto de entrada ASGI del servicio de checkout (FastAPI).

Ajustes clave:
- .env se carga antes de construir settings.
- Logging configurado desde LOG_LEVEL / LOG_FORMAT.
- Cliente Stripe (transporte keep-alive) creado en startup y cerrado en shutdown.
- Observabilidad Prometheus (/metrics) vía app.observability.prom.
- JSONExceptionMiddleware como última línea de defensa ante errores.

Las cabeceras CORS las emite el propio handler de checkout (valores fijos),
por eso no se monta CORSMiddleware.

Fecha: 2026-10-19
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que construya settings
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD: override=False para respetar variables del entorno (Vercel, etc.)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_ENVIRONMENT = os.getenv("ENVIRONMENT", "development").strip().strip('"').strip("'").lower()
_override_env = _ENVIRONMENT != "production"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI
import uvicorn

from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.modules.checkout.routes import method_not_allowed_handler
from app.observability.prom import setup_observability
from app.routes import router as main_router
from app.shared.core.stripe_client_cache import close_stripe_client, create_stripe_client
from app.shared.middleware import JSONExceptionMiddleware
from app.shared.utils.json_response import UTF8JSONResponse

setup_logging()
logger = logging.getLogger(__name__)

logger.info(f"[dotenv] Loaded {_ENV_PATH} (override={_override_env}, ENVIRONMENT={_ENVIRONMENT})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    await create_stripe_client(get_settings())
    logger.info("Checkout service started.")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await close_stripe_client()
        logger.info("Checkout service stopped.")


_settings = get_settings()

app = FastAPI(
    title="Book Checkout API",
    description="Creación de sesiones de Stripe Checkout para pdf y paperback",
    version=_settings.app_version,
    lifespan=lifespan,
    openapi_tags=[{"name": "checkout", "description": "Sesiones de pago"}],
    default_response_class=UTF8JSONResponse,
)

setup_observability(app)
# Añadido al final: queda como el middleware más externo
app.add_middleware(JSONExceptionMiddleware)

app.include_router(main_router)
# 405 del router (métodos no registrados) con el cuerpo y CORS del checkout
app.add_exception_handler(405, method_not_allowed_handler)


if __name__ == "__main__":
    is_production = _ENVIRONMENT == "production"
    logger.info(f"Starting server (production={is_production})")

    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=not is_production,
    )

# Fin del archivo app/main.py
