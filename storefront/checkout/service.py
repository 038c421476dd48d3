"""
Cas d'usage 'checkout': orchestre auth, repository, pricing, stripe.

Le panier est entièrement détenu par le client: il est re-validé contre le catalogue à chaque appel.
Non idempotent: chaque appel crée une nouvelle session Stripe.
"""
import logging
from typing import List, Optional

from storefront import config
from storefront.auth import service as auth_service
from . import pricing
from . import repository
from . import stripe_client
from .errors import Unauthorized, UpstreamUnavailable
from .models import CartLine, CheckoutSession

logger = logging.getLogger(__name__)

def build_redirect_urls(origin: Optional[str]) -> tuple[str, str]:
    base = (origin or config.BASE_URL).rstrip("/")
    return f"{base}{config.CHECKOUT_SUCCESS_PATH}", f"{base}{config.CHECKOUT_CANCEL_PATH}"

def authenticate(auth_credential: Optional[str]) -> dict:
    """
    Échange le jeton contre l'identité utilisateur.
    - None: aucun identifiant fourni; "" ou jeton refusé: identifiant invalide.
    """
    if auth_credential is None:
        raise Unauthorized("Non authentifié")
    if not auth_credential:
        raise Unauthorized("Session invalide")
    try:
        user = auth_service.get_user_from_token(auth_credential)
    except Exception as e:
        logger.warning("checkout.authenticate rejected token: %s", e)
        raise Unauthorized("Session invalide") from e
    if not user.get("id"):
        raise Unauthorized("Session invalide")
    return user

def create_checkout_session(
    auth_credential: Optional[str],
    cart_lines: List[CartLine],
    origin: Optional[str] = None,
) -> CheckoutSession:
    """
    Transforme un panier non fiable en session Stripe correctement tarifée.
    Étapes:
      1) Rejets sans appel externe: identifiant absent, panier vide, quantité < 1
      2) Authentification (échec => Unauthorized, avant tout accès catalogue)
      3) Agrégation des ids distincts (une seule ligne par id, quantités sommées)
      4) Lecture groupée du catalogue (panne => UpstreamUnavailable)
      5) Re-tarification par id avec les seuls prix du catalogue (id inconnu => InvalidRequest)
      6) Création de la session Stripe (échec => UpstreamUnavailable, sans relance)
    """
    if auth_credential is None:
        raise Unauthorized("Non authentifié")
    quantities = pricing.collect_quantities(cart_lines)

    user = authenticate(auth_credential)
    user_id = str(user.get("id"))

    products = repository.get_products_map(quantities.keys(), user_token=auth_credential)
    line_items = pricing.to_line_items(products, quantities)

    success_url, cancel_url = build_redirect_urls(origin)
    session = stripe_client.create_session(
        line_items=[li.to_stripe(config.CHECKOUT_CURRENCY) for li in line_items],
        mode="payment",
        success_url=success_url,
        cancel_url=cancel_url,
        allowed_countries=list(config.CHECKOUT_ALLOWED_COUNTRIES),
        metadata=pricing.make_metadata(user_id, quantities),
    )
    url = session.get("url")
    if not url:
        raise UpstreamUnavailable("Session Stripe invalide")

    logger.info(
        "checkout.session created id=%s user_id=%s lines=%s amount=%s",
        session.get("id"), user_id, len(line_items), pricing.total_amount(line_items),
    )
    return CheckoutSession(id=session.get("id"), url=url, success_url=success_url, cancel_url=cancel_url)
