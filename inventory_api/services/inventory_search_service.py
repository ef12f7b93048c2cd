"""재고 검색 서비스."""

import logging

from sqlalchemy.orm import Session

from inventory_api.repositories import InventoryRepository
from inventory_api.schemas.inventory import InventoryResponse
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.search import InventorySearchCriteria
from inventory_api.services.query_executor import QueryExecutor
from inventory_api.specifications import compile_inventory_criteria, inventory_specs

logger = logging.getLogger(__name__)


class InventorySearchService:
    """재고 다중 조건 검색 서비스 (읽기 전용)"""

    def __init__(self, db: Session):
        self.query_executor = QueryExecutor(InventoryRepository(db), InventoryResponse)

    def search_inventories(
        self, criteria: InventorySearchCriteria | None
    ) -> list[InventoryResponse]:
        logger.debug("Searching inventories with criteria: %s", criteria)
        specification = compile_inventory_criteria(criteria)
        return self.query_executor.execute_specification_query(specification, "advanced search")

    def search_inventories_paged(
        self, criteria: InventorySearchCriteria | None, page_request: PageRequest
    ) -> Page[InventoryResponse]:
        logger.debug("Searching inventories with criteria: %s, page: %s", criteria, page_request)
        specification = compile_inventory_criteria(criteria)
        return self.query_executor.execute_paged_query(
            page_request, "advanced search with pagination", specification
        )

    def find_by_product_id(self, product_id: int | None) -> list[InventoryResponse]:
        return self.query_executor.execute_specification_query(
            inventory_specs.has_product_id(product_id), f"find by product id: {product_id}"
        )

    def find_by_stock_range(
        self, min_stock: int | None, max_stock: int | None
    ) -> list[InventoryResponse]:
        return self.query_executor.execute_specification_query(
            inventory_specs.has_stock_between(min_stock, max_stock),
            f"find by stock range: {min_stock} - {max_stock}",
        )

    def find_by_minimum_stock(self, min_stock: int | None) -> list[InventoryResponse]:
        """재고가 min_stock보다 많은 레코드 (경계 미포함)"""
        return self.query_executor.execute_specification_query(
            inventory_specs.has_stock_greater_than(min_stock),
            f"find inventories with minimum stock: {min_stock}",
        )
