"""
Panier client: valeur explicite et sérialisable, détenue par la session du client.

Le total est recalculé après chaque mutation à partir des prix affichés côté client.
Il sert uniquement à l'affichage: le checkout ignore ces prix et re-tarifie côté serveur.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from storefront.catalog.models import Product


class CartItem(BaseModel):
    id: int
    producto: str
    precio: float
    quantity: int = Field(ge=1)
    image_url: Optional[str] = None

    @property
    def subtotal(self) -> float:
        return self.precio * self.quantity


class CartStore(BaseModel):
    items: List[CartItem] = Field(default_factory=list)
    total: float = 0.0

    def _recompute(self) -> None:
        self.total = round(sum(item.subtotal for item in self.items), 2)

    def find(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == product_id), None)

    def add_item(self, product: Product) -> None:
        """Ajoute un produit; s'il est déjà présent, incrémente sa quantité."""
        existing = self.find(product.id)
        if existing:
            existing.quantity += 1
        else:
            self.items.append(CartItem(
                id=product.id,
                producto=product.producto,
                precio=product.precio,
                quantity=1,
                image_url=product.image_url,
            ))
        self._recompute()

    def remove_item(self, product_id: int) -> None:
        self.items = [item for item in self.items if item.id != product_id]
        self._recompute()

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Fixe la quantité; quantity <= 0 retire la ligne."""
        if quantity <= 0:
            self.remove_item(product_id)
            return
        item = self.find(product_id)
        if item:
            item.quantity = quantity
        self._recompute()

    def clear(self) -> None:
        self.items = []
        self.total = 0.0

    def to_checkout_payload(self) -> Dict[str, Any]:
        """Corps attendu par POST /api/v1/checkout."""
        return {"items": [item.model_dump(exclude_none=True) for item in self.items]}

    def dump(self) -> str:
        return self.model_dump_json()

    @classmethod
    def load(cls, raw: Optional[str]) -> "CartStore":
        """Restaure un panier persisté; le total est recalculé plutôt que relu."""
        if not raw:
            return cls()
        store = cls.model_validate_json(raw)
        store._recompute()
        return store
