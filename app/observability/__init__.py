# -*- coding: utf-8 -*-
"""Observabilidad (Prometheus)."""
