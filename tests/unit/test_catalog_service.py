from storefront.catalog import service as svc
from storefront.catalog.models import Product


def _products():
    return [
        Product(id=1, producto="Aceite de coco", precio=12.0, palabras_clave="aceites, cocina"),
        Product(id=2, producto="Jabón artesanal", precio=4.5, descripcion_detallada="Hecho con aceite de oliva",
                palabras_clave="cuidado personal, jabones"),
        Product(id=3, producto="Té verde", precio=6.0, beneficios_usos="Antioxidante", palabras_clave="infusiones, cocina"),
    ]

def test_search_blank_query_returns_all():
    assert len(svc.search_products(_products(), "  ")) == 3
    assert len(svc.search_products(_products(), None)) == 3

def test_search_matches_any_term_case_insensitive():
    found = svc.search_products(_products(), "ACEITE antioxidante")
    assert [p.id for p in found] == [1, 2, 3]

def test_search_no_match():
    assert svc.search_products(_products(), "chocolate") == []

def test_filter_by_category():
    assert [p.id for p in svc.filter_by_category(_products(), "Cocina")] == [1, 3]
    assert len(svc.filter_by_category(_products(), "")) == 3

def test_extract_categories_distinct_first_seen():
    assert svc.extract_categories(_products()) == ["aceites", "cocina", "cuidado personal", "jabones", "infusiones"]
    assert svc.extract_categories(_products(), limit=2) == ["aceites", "cocina"]
