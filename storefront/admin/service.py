# module storefront.admin.service

from typing import List, Optional, Dict, Any
from storefront.catalog import repository as catalog_repository

def list_products() -> List[dict]:
    return catalog_repository.list_products()

def create_product(data: Dict[str, Any]) -> Optional[dict]:
    return catalog_repository.create_product(data)

def update_product(product_id: int, data: Dict[str, Any]) -> Optional[dict]:
    return catalog_repository.update_product(product_id, data)

def delete_product(product_id: int) -> bool:
    return catalog_repository.delete_product(product_id)
