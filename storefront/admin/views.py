"""Endpoints admin pour la gestion des produits.
- CRUD: listing, création, mise à jour, suppression (protégés par require_admin).
- Écritures via le client service-role Supabase.
- Gestion d'erreurs: 400 pour validations ou échec repository.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from storefront.admin import service as admin_service
from storefront.catalog.models import ProductPayload, ProductUpdate
from storefront.utils.security import require_admin

router = APIRouter(prefix="/api/v1/admin/products", tags=["Admin API"], dependencies=[Depends(require_admin)])

@router.get("")
def list_products():
    return JSONResponse({"items": admin_service.list_products()})

@router.post("")
def create_product(payload: ProductPayload):
    """Crée un produit. En cas d’échec repository: 400."""
    created = admin_service.create_product(payload.model_dump())
    if not created:
        raise HTTPException(status_code=400, detail="Echec de création")
    return JSONResponse(created, status_code=201)

@router.put("/{product_id}")
def update_product(product_id: int, payload: ProductUpdate):
    """Met à jour un produit.
    - Accepte les champs présents seulement (un champ explicitement null est effacé).
    - 400 si aucune donnée fournie ou si échec repository.
    """
    data: Dict[str, Any] = payload.model_dump(exclude_unset=True)
    if not data:
        raise HTTPException(status_code=400, detail="Aucune donnée à mettre à jour")
    updated = admin_service.update_product(product_id, data)
    if not updated:
        raise HTTPException(status_code=400, detail="Echec de mise à jour")
    return JSONResponse(updated)

@router.delete("/{product_id}")
def delete_product(product_id: int):
    ok = admin_service.delete_product(product_id)
    if not ok:
        raise HTTPException(status_code=400, detail="Echec de suppression")
    return JSONResponse({"ok": True})
