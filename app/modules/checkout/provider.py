# -*- coding: utf-8 -*-
"""
app/modules/checkout/provider.py

Cliente del proveedor de pagos (Stripe Checkout Sessions) sobre el SDK
oficial de Stripe.

Única implementación de la llamada remota:
`StripeClient.checkout.sessions.create_async(params=payload)`. El mapper
solo conoce el método create_session(payload).

Errores:
- stripe.StripeError con respuesta de la API -> ProviderError
  (http_status + mensaje de Stripe).
- stripe.APIConnectionError (red / timeout del transporte) y el límite
  total de la llamada (TimeoutError) -> se propagan y el servicio los
  traduce a 500.

Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import anyio
import stripe

from app.shared.config.settings_checkout import CheckoutSettings
from app.shared.core.stripe_client_cache import get_stripe_client
from .errors import ProviderError, ProviderNotConfiguredError
from .schemas import ProviderSession

logger = logging.getLogger(__name__)


class StripeCheckoutClient:
    """
    Cliente de creación de sesiones de checkout en Stripe.

    Si no se inyecta stripe_client se usa el cliente global
    (app.shared.core.stripe_client_cache).
    """

    def __init__(
        self,
        *,
        secret_key: Optional[str],
        timeout_seconds: float = 25.0,
        stripe_client: Optional[stripe.StripeClient] = None,
    ):
        self._secret_key = secret_key
        self._timeout_seconds = timeout_seconds
        self._stripe_client = stripe_client

    @classmethod
    def from_settings(
        cls,
        settings: CheckoutSettings,
        stripe_client: Optional[stripe.StripeClient] = None,
    ) -> "StripeCheckoutClient":
        secret = settings.stripe_secret_key
        return cls(
            secret_key=secret.get_secret_value() if secret else None,
            timeout_seconds=settings.stripe_timeout_seconds,
            stripe_client=stripe_client,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._secret_key)

    async def create_session(self, payload: Dict[str, Any]) -> ProviderSession:
        """
        Crea una Checkout Session con el payload ya armado.

        Raises:
            ProviderNotConfiguredError: falta STRIPE_SECRET_KEY.
            ProviderError: Stripe rechazó la petición.
            TimeoutError / stripe.APIConnectionError: fallo de transporte.
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError()

        client = self._stripe_client or await get_stripe_client()

        try:
            # Límite total de la llamada (además del timeout del transporte)
            with anyio.fail_after(self._timeout_seconds):
                session = await client.checkout.sessions.create_async(params=payload)
        except stripe.APIConnectionError:
            raise
        except stripe.StripeError as exc:
            logger.warning(
                "Stripe API error: status=%s message=%s",
                exc.http_status,
                exc.user_message,
            )
            raise ProviderError(exc.http_status, exc.user_message) from exc

        return ProviderSession(id=session.id, url=session.url)


__all__ = ["StripeCheckoutClient"]

# Fin del archivo app/modules/checkout/provider.py
