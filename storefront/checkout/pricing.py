"""
Logique de re-tarification pure (pas de Stripe, pas de DB).
"""
import json
import logging
from typing import Dict, List

from .errors import InvalidRequest
from .models import CartLine, CatalogProduct, PricedLineItem

logger = logging.getLogger(__name__)

# Stripe: 50 clés de métadonnées max, 500 caractères par valeur
METADATA_VALUE_MAX = 500
MAX_CART_CHUNKS = 40

# module storefront.checkout.pricing
def collect_quantities(lines: List[CartLine]) -> Dict[int, int]:
    """
    Agrège un panier [{id, quantity}, ...] en {product_id: total_quantity}.
    - Conserve l'ordre de première apparition des ids.
    - Un même id présent sur plusieurs lignes donne une seule entrée (quantités sommées).
    - Soulève InvalidRequest si le panier est vide ou si une ligne a quantity < 1.
    """
    if not lines:
        raise InvalidRequest("Panier vide")
    quantities: Dict[int, int] = {}
    for line in lines:
        if line.quantity < 1:
            raise InvalidRequest(f"Quantité invalide pour le produit {line.id}")
        quantities[line.id] = quantities.get(line.id, 0) + line.quantity
    return quantities

def to_line_items(products_by_id: Dict[int, CatalogProduct], quantities: Dict[int, int]) -> List[PricedLineItem]:
    """
    Construit les lignes tarifées à partir des produits du catalogue, par id.
    - Seuls nom, image et prix du catalogue sont utilisés.
    - Un id introuvable rejette tout le panier (pas de checkout partiel).
    """
    line_items: List[PricedLineItem] = []
    for product_id, qty in quantities.items():
        product = products_by_id.get(product_id)
        if product is None:
            raise InvalidRequest(f"Produit invalide: {product_id}")
        line_items.append(PricedLineItem.from_product(product, qty))
    return line_items

def total_amount(line_items: List[PricedLineItem]) -> int:
    return sum(li.unit_amount * li.quantity for li in line_items)

def make_metadata(user_id: str, quantities: Dict[int, int]) -> Dict[str, str]:
    """
    Métadonnées Stripe associées à la session.
    - cart: JSON compact découpé en cart_0, cart_1, ... (500 chars max par valeur, limite Stripe).
      La concaténation des morceaux, dans l'ordre, redonne le JSON complet.
    - Au-delà de MAX_CART_CHUNKS morceaux, le panier n'est pas joint (cart_items donne le nombre de lignes).
    """
    cart_meta = [{"id": pid, "quantity": qty} for pid, qty in quantities.items()]
    cart_json = json.dumps(cart_meta, separators=(",", ":"))
    chunks = [cart_json[i:i + METADATA_VALUE_MAX] for i in range(0, len(cart_json), METADATA_VALUE_MAX)]

    metadata = {"user_id": user_id, "cart_items": str(len(cart_meta))}
    if len(chunks) > MAX_CART_CHUNKS:
        logger.warning("checkout.pricing cart metadata omitted lines=%s chars=%s", len(cart_meta), len(cart_json))
        return metadata
    for index, chunk in enumerate(chunks):
        metadata[f"cart_{index}"] = chunk
    return metadata
