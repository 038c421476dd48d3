"""
Accès au catalogue pour le checkout (lecture seule).
"""
from typing import Dict, Iterable, List, Optional
import logging

from pydantic import ValidationError

import storefront.infra.supabase_client as supabase_client
from .errors import UpstreamUnavailable
from .models import CatalogProduct

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, producto, precio, image_url"

# module storefront.checkout.repository
def fetch_products_by_ids(ids: List[int], user_token: Optional[str] = None) -> List[dict]:
    """
    Récupère les produits par leurs IDs en une seule requête (table 'products').
    - Avec user_token: client utilisateur (RLS actif), sinon client anon partagé.
    - Soulève UpstreamUnavailable si Supabase échoue (distinct de « produit introuvable »).
    """
    if not ids:
        return []
    try:
        client = supabase_client.get_user_supabase(user_token) if user_token else supabase_client.get_supabase()
        res = (
            client
            .table("products")
            .select(PRODUCT_COLUMNS)
            .in_("id", list(ids))
            .execute()
        )
    except Exception as e:
        logger.exception("checkout.repository.fetch_products_by_ids failed ids=%s", ids)
        raise UpstreamUnavailable(f"Impossible de vérifier les produits: {e}") from e
    return res.data or []

def get_products_map(ids: Iterable[int], user_token: Optional[str] = None) -> Dict[int, CatalogProduct]:
    """
    Retourne un dict {id: CatalogProduct} à partir d'une liste d'IDs distincts.
    Une ligne de catalogue corrompue (prix manquant/négatif) est traitée comme une panne du catalogue.
    """
    rows = fetch_products_by_ids(list(ids), user_token=user_token)
    try:
        products = [CatalogProduct.model_validate(row) for row in rows]
    except ValidationError as e:
        logger.error("checkout.repository.get_products_map invalid catalog row: %s", e)
        raise UpstreamUnavailable("Catalogue incohérent") from e
    return {p.id: p for p in products}
