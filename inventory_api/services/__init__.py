"""비즈니스 로직 서비스."""

from inventory_api.services.inventory_search_service import InventorySearchService
from inventory_api.services.inventory_service import InventoryService
from inventory_api.services.product_search_service import ProductSearchService
from inventory_api.services.product_service import ProductService
from inventory_api.services.query_executor import QueryExecutor

__all__ = [
    "InventorySearchService",
    "InventoryService",
    "ProductSearchService",
    "ProductService",
    "QueryExecutor",
]
