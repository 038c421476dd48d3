"""Endpoints publics du catalogue.
- Listing avec recherche par mots (q) et filtre par catégorie (mot-clé).
- Catégories populaires extraites des mots-clés.
- Détail produit: 404 quand introuvable, 500 si Supabase échoue.
"""
import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, HTTPException
from postgrest.exceptions import APIError
from pydantic import ValidationError

from storefront.catalog import repository as catalog_repository
from storefront.catalog import service as catalog_service
from storefront.catalog.models import Product

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["Catalog API"])

def _load_products() -> List[Product]:
    try:
        rows = catalog_repository.list_products()
    except (APIError, httpx.HTTPError) as e:
        logger.exception("catalog.views list_products failed")
        raise HTTPException(status_code=500, detail="Erreur de lecture des produits") from e

    products: List[Product] = []
    for row in rows:
        try:
            products.append(Product.model_validate(row))
        except ValidationError as e:
            # logge id et message: utile pour nettoyer les lignes incomplètes
            logger.warning("Product validation skipped id=%s error=%s", row.get("id"), e)
    return products

@router.get("", response_model=List[Product])
def list_products(q: Optional[str] = None, category: Optional[str] = None):
    """category puis q: les deux filtres se cumulent."""
    products = catalog_service.filter_by_category(_load_products(), category)
    return catalog_service.search_products(products, q)

@router.get("/categories")
def list_categories():
    return {"categories": catalog_service.extract_categories(_load_products())}

@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int):
    try:
        row = catalog_repository.get_product(product_id)
    except (APIError, httpx.HTTPError) as e:
        raise HTTPException(status_code=500, detail="Erreur de lecture des produits") from e
    if not row:
        raise HTTPException(status_code=404, detail="Produit introuvable")
    return Product.model_validate(row)
