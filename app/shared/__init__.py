# -*- coding: utf-8 -*-
"""
app/shared/__init__.py

Infraestructura compartida: configuración, cliente HTTP global,
middleware y utilidades de respuesta. Sin efectos en import-time.
"""
