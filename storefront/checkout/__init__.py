"""
Module 'checkout' (feature-first): point d'entrée public.
Réunit re-tarification du panier, lecture catalogue, client Stripe et service de session.
"""

from .errors import CheckoutError, InvalidRequest, Unauthorized, UpstreamUnavailable
from .models import CartLine, CatalogProduct, PricedLineItem, CheckoutSession
from .pricing import collect_quantities, to_line_items, total_amount, make_metadata
from .service import create_checkout_session

__all__ = [
    # errors
    "CheckoutError",
    "InvalidRequest",
    "Unauthorized",
    "UpstreamUnavailable",
    # models
    "CartLine",
    "CatalogProduct",
    "PricedLineItem",
    "CheckoutSession",
    # pricing
    "collect_quantities",
    "to_line_items",
    "total_amount",
    "make_metadata",
    # service
    "create_checkout_session",
]
