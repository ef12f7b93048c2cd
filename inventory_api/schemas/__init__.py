"""
Pydantic 스키마 모듈
"""

from inventory_api.schemas.inventory import (
    InventoryRequest,
    InventoryResponse,
    StockLevelUpdate,
)
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.product import (
    ProductRequest,
    ProductResponse,
    ProductStatusUpdate,
)
from inventory_api.schemas.search import (
    InventorySearchCriteria,
    ProductSearchCriteria,
)

__all__ = [
    "InventoryRequest",
    "InventoryResponse",
    "StockLevelUpdate",
    "Page",
    "PageRequest",
    "ProductRequest",
    "ProductResponse",
    "ProductStatusUpdate",
    "InventorySearchCriteria",
    "ProductSearchCriteria",
]
