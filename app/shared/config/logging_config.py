# -*- coding: utf-8 -*-
"""
app/shared/config/logging_config.py

Logging del servicio de checkout vía dictConfig.

- plain: línea legible para desarrollo local (uvicorn).
- json: una línea JSON por evento (python-json-logger), pensada para los
  colectores de logs de Netlify / Vercel / CloudWatch. Incluye el nombre
  del servicio como campo fijo.

httpx / httpcore quedan en WARNING: a nivel INFO registran cada petición
saliente a Stripe y duplican el log de checkout.

Fecha: 2026-10-19
"""

import logging.config
from typing import Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "pretty", "json"]

QUIET_LOGGERS = ("httpx", "httpcore")


def build_logging_config(
    level: LogLevel = "INFO",
    fmt: LogFormat = "plain",
    service: Optional[str] = None,
) -> dict:
    """Diccionario para logging.config.dictConfig (separado para poder testearlo)."""
    use_json = fmt == "json"

    json_formatter = {
        "()": "pythonjsonlogger.json.JsonFormatter",
        "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
        "rename_fields": {"levelname": "level", "name": "logger"},
    }
    if service:
        json_formatter["static_fields"] = {"service": service}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": json_formatter,
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if use_json else "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            name: {"level": "WARNING"} for name in QUIET_LOGGERS
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }


def setup_logging(
    level: LogLevel = "INFO",
    fmt: LogFormat = "plain",
    service: Optional[str] = None,
) -> None:
    """
    Configura el logging del proceso.

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json", service="book-checkout")
    """
    logging.config.dictConfig(build_logging_config(level, fmt, service))


__all__ = ["build_logging_config", "setup_logging"]

# Fin del archivo app/shared/config/logging_config.py
