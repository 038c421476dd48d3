# module storefront.catalog.models
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Ligne de la table 'products'. Les champs texte absents restent None (distinct de "")."""
    model_config = ConfigDict(extra="ignore")

    id: int
    producto: str
    precio: float = Field(ge=0)
    descripcion_detallada: Optional[str] = None
    beneficios_usos: Optional[str] = None
    palabras_clave: Optional[str] = None
    proveedor: Optional[str] = None
    especificacion: Optional[str] = None
    cantidad: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def searchable_text(self) -> str:
        parts = (self.producto, self.descripcion_detallada, self.beneficios_usos, self.palabras_clave)
        return "\n".join(p for p in parts if p).lower()

    def keywords(self) -> list[str]:
        return [k.strip() for k in (self.palabras_clave or "").split(",") if k.strip()]


class ProductPayload(BaseModel):
    """Corps accepté par l'admin pour créer/modifier un produit."""
    model_config = ConfigDict(extra="forbid")

    producto: str = Field(min_length=1)
    precio: float = Field(ge=0)
    descripcion_detallada: Optional[str] = None
    beneficios_usos: Optional[str] = None
    palabras_clave: Optional[str] = None
    proveedor: Optional[str] = None
    especificacion: Optional[str] = None
    cantidad: Optional[str] = None
    image_url: Optional[str] = None


class ProductUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    producto: Optional[str] = Field(default=None, min_length=1)
    precio: Optional[float] = Field(default=None, ge=0)
    descripcion_detallada: Optional[str] = None
    beneficios_usos: Optional[str] = None
    palabras_clave: Optional[str] = None
    proveedor: Optional[str] = None
    especificacion: Optional[str] = None
    cantidad: Optional[str] = None
    image_url: Optional[str] = None
