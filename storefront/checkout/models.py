"""
Modèles du checkout.

- CartLine: ligne envoyée par le client (non fiable). precio/producto/image_url sont indicatifs,
  servent à l'affichage optimiste côté front et ne sont jamais lus pour le calcul du prix.
- CatalogProduct: produit de référence lu dans la table 'products' (source de vérité du prix).
- PricedLineItem: ligne calculée côté serveur, seule représentation envoyée à Stripe.
- CheckoutSession: session Stripe créée (non persistée localement).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CartLine(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    quantity: int
    producto: Optional[str] = None
    precio: Optional[float] = None
    image_url: Optional[str] = None


class CheckoutRequest(BaseModel):
    items: List[CartLine] = Field(default_factory=list)


class CatalogProduct(BaseModel):
    id: int
    producto: str
    precio: Decimal = Field(ge=0)
    image_url: Optional[str] = None

    @property
    def unit_amount(self) -> int:
        """Prix unitaire en centimes: round(precio * 100), arrondi commercial."""
        return int((self.precio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PricedLineItem(BaseModel):
    name: str
    unit_amount: int = Field(ge=0)
    quantity: int = Field(ge=1)
    images: List[str] = Field(default_factory=list)

    @classmethod
    def from_product(cls, product: CatalogProduct, quantity: int) -> "PricedLineItem":
        return cls(
            name=product.producto,
            unit_amount=product.unit_amount,
            quantity=quantity,
            images=[product.image_url] if product.image_url else [],
        )

    def to_stripe(self, currency: str) -> Dict[str, Any]:
        return {
            "quantity": self.quantity,
            "price_data": {
                "currency": currency,
                "unit_amount": self.unit_amount,
                "product_data": {"name": self.name, "images": self.images},
            },
        }


class CheckoutSession(BaseModel):
    url: str
    success_url: str
    cancel_url: str
    id: Optional[str] = None
