"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import logging
import threading
from typing import Any, Dict, List, Optional

import stripe

from storefront import config
from .errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

_http_client: Optional[stripe.RequestsClient] = None
_configure_lock = threading.Lock()

def _get_http_client() -> stripe.RequestsClient:
    """Client HTTP Stripe partagé (sessions requests réutilisées), créé une seule fois."""
    global _http_client
    if _http_client is None:
        with _configure_lock:
            if _http_client is None:
                _http_client = stripe.RequestsClient(timeout=config.GATEWAY_TIMEOUT_SECONDS)
    return _http_client

# module storefront.checkout.stripe_client
def require_stripe():
    """
    Prépare le module stripe pour un appel.
    - STRIPE_SECRET_KEY absente: UpstreamUnavailable pour la requête, le processus continue.
    - Timeout borné (GATEWAY_TIMEOUT_SECONDS) et aucune relance automatique.
    """
    if not config.STRIPE_SECRET_KEY:
        raise UpstreamUnavailable("STRIPE_SECRET_KEY manquant")
    client = _get_http_client()
    # état global du module stripe: réécrit seulement s'il diffère
    if stripe.api_key != config.STRIPE_SECRET_KEY or stripe.default_http_client is not client:
        with _configure_lock:
            stripe.api_key = config.STRIPE_SECRET_KEY
            stripe.max_network_retries = 0
            stripe.default_http_client = client
    return stripe

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    mode: str,
    success_url: str,
    cancel_url: str,
    allowed_countries: List[str],
    metadata: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - line_items: lignes Stripe déjà tarifées (price_data)
    - mode: "payment" (paiement unique)
    - allowed_countries: pays acceptés pour l'adresse de livraison
    Retour: dict session (ex: {"id": "cs_test_...", "url": "https://..."})
    """
    require_stripe()
    try:
        session = stripe.checkout.Session.create(
            line_items=line_items,
            mode=mode,
            success_url=success_url,
            cancel_url=cancel_url,
            shipping_address_collection={"allowed_countries": allowed_countries},
            metadata=metadata,
        )
    except stripe.StripeError as e:
        logger.exception("checkout.stripe_client.create_session failed")
        raise UpstreamUnavailable(str(e), message=e.user_message) from e
    return {"id": getattr(session, "id", None), "url": getattr(session, "url", None)}
