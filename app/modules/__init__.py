# -*- coding: utf-8 -*-
"""Módulos de dominio del servicio (checkout)."""
