"""쓰기 요청 검증기."""

from inventory_api.validators.inventory_validator import InventoryValidator
from inventory_api.validators.product_validator import ProductValidator

__all__ = ["InventoryValidator", "ProductValidator"]
