"""
Recherche et filtrage du catalogue (logique pure, sur la liste déjà chargée).
"""
from typing import List, Optional

from .models import Product

MAX_CATEGORIES = 10

def search_products(products: List[Product], query: Optional[str]) -> List[Product]:
    """
    Recherche par mots: un produit correspond si AU MOINS un terme apparaît dans
    nom, description détaillée, bénéfices/usages ou mots-clés (insensible à la casse).
    Une requête vide renvoie tout le catalogue.
    """
    terms = [t for t in (query or "").lower().split() if t]
    if not terms:
        return list(products)
    return [p for p in products if any(t in p.searchable_text() for t in terms)]

def filter_by_category(products: List[Product], category: Optional[str]) -> List[Product]:
    needle = (category or "").strip().lower()
    if not needle:
        return list(products)
    return [p for p in products if needle in (p.palabras_clave or "").lower()]

def extract_categories(products: List[Product], limit: int = MAX_CATEGORIES) -> List[str]:
    """Mots-clés distincts (palabras_clave séparés par des virgules), ordre de première apparition."""
    seen: List[str] = []
    for product in products:
        for keyword in product.keywords():
            if keyword not in seen:
                seen.append(keyword)
    return seen[:limit]
