# -*- coding: utf-8 -*-
"""
app/__init__.py

Paquete principal del servicio de checkout de libros.

Permite importar los módulos internos como 'app.*' tanto desde el
servidor ASGI (app.main) como desde los handlers por evento
(app.handlers.netlify).
"""

__version__ = "1.0.0"

# Fin del archivo app/__init__.py
