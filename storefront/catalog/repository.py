from typing import List, Optional, Dict, Any
import logging

from storefront.infra.supabase_client import get_supabase, get_service_supabase

logger = logging.getLogger(__name__)

# module storefront.catalog.repository
def list_products() -> List[dict]:
    """
    Tous les produits, du plus récent au plus ancien (id décroissant).
    Les erreurs Supabase (postgrest APIError, réseau) remontent à la vue.
    """
    res = get_supabase().table("products").select("*").order("id", desc=True).execute()
    return res.data or []

def get_product(product_id: int) -> Optional[dict]:
    try:
        res = (
            get_supabase()
            .table("products")
            .select("*")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
    except Exception:
        logger.exception("catalog.repository.get_product failed id=%s", product_id)
        raise
    rows = res.data or []
    return rows[0] if rows else None

def create_product(data: Dict[str, Any]) -> Optional[dict]:
    try:
        res = get_service_supabase().table("products").insert(data).execute()
        rows = getattr(res, "data", None) or []
        if isinstance(rows, list) and rows:
            return rows[0]
        return {"status": "ok"}
    except Exception:
        logger.exception("catalog.repository.create_product failed data=%s", data)
        return None

def update_product(product_id: int, data: Dict[str, Any]) -> Optional[dict]:
    try:
        res = (
            get_service_supabase()
            .table("products")
            .update(data)
            .eq("id", product_id)
            .execute()
        )
        rows = getattr(res, "data", None) or []
        if isinstance(rows, list) and rows:
            return rows[0]
        return {"status": "ok"}
    except Exception:
        logger.exception("catalog.repository.update_product failed id=%s data=%s", product_id, data)
        return None

def delete_product(product_id: int) -> bool:
    try:
        get_service_supabase().table("products").delete().eq("id", product_id).execute()
        return True
    except Exception:
        logger.exception("catalog.repository.delete_product failed id=%s", product_id)
        return False
