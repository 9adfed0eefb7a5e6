# -*- coding: utf-8 -*-
"""
app/core/logging.py

Fachada de `app.shared.config.logging_config` para mantener un punto de
entrada único bajo `app.core`. Sin argumentos usa LOG_LEVEL / LOG_FORMAT.
"""

from typing import Literal, Optional

from app.shared.config.logging_config import setup_logging as _setup_logging
from app.shared.config.settings_checkout import get_checkout_settings


def setup_logging(
    level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None,
    fmt: Optional[Literal["plain", "pretty", "json"]] = None,
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging; por defecto settings.log_level.
        fmt: Formato de salida; por defecto settings.log_format.
    """
    settings = get_checkout_settings()
    _setup_logging(
        level=level or settings.log_level,
        fmt=fmt or settings.log_format,
        service=settings.app_name,
    )

# Fin del archivo app/core/logging.py
