# -*- coding: utf-8 -*-
"""
app/routes/__init__.py

Ensamblador principal de ruteadores del servicio.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir las rutas de checkout (/api/create-checkout*).
"""

from fastapi import APIRouter

from app.modules.checkout.routes import router as checkout_router
from .health_routes import router as health_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)
router.include_router(checkout_router)

__all__ = ["router"]

# Fin del archivo app/routes/__init__.py
