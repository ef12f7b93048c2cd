"""레코드 저장소."""

from inventory_api.repositories.base import Repository
from inventory_api.repositories.inventory_repository import InventoryRepository
from inventory_api.repositories.product_repository import ProductRepository

__all__ = ["Repository", "InventoryRepository", "ProductRepository"]
