"""상품 검색 서비스."""

import logging

from sqlalchemy.orm import Session

from inventory_api.models import ProductStatus
from inventory_api.repositories import ProductRepository
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.product import ProductResponse
from inventory_api.schemas.search import ProductSearchCriteria
from inventory_api.services.query_executor import QueryExecutor
from inventory_api.specifications import compile_product_criteria, product_specs

logger = logging.getLogger(__name__)


class ProductSearchService:
    """
    상품 다중 조건 검색 서비스

    읽기 전용이며 결과가 없으면 빈 리스트를 반환합니다.
    """

    def __init__(self, db: Session):
        self.query_executor = QueryExecutor(ProductRepository(db), ProductResponse)

    def search_products(self, criteria: ProductSearchCriteria | None) -> list[ProductResponse]:
        """
        검색 조건의 모든 필드를 AND로 결합하여 검색합니다.

        Args:
            criteria: 검색 조건 (모든 필드가 비어 있으면 전체 조회)

        Returns:
            조건과 일치하는 상품 리스트
        """
        logger.debug("Searching products with criteria: %s", criteria)
        specification = compile_product_criteria(criteria)
        return self.query_executor.execute_specification_query(specification, "advanced search")

    def search_products_paged(
        self, criteria: ProductSearchCriteria | None, page_request: PageRequest
    ) -> Page[ProductResponse]:
        logger.debug("Searching products with criteria: %s, page: %s", criteria, page_request)
        specification = compile_product_criteria(criteria)
        return self.query_executor.execute_paged_query(
            page_request, "advanced search with pagination", specification
        )

    def find_by_name(self, name: str | None) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.has_name(name), f"find by name: {name}"
        )

    def find_by_category(self, category: str | None) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.has_category(category), f"find by category: {category}"
        )

    def find_by_keyword(self, keyword: str | None) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.search_by_keyword(keyword), f"search by keyword: {keyword}"
        )

    def find_active_products(self) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.is_active_and_available(), "find active products"
        )

    def find_by_price_range(
        self, min_price: float | None, max_price: float | None
    ) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.has_price_between(min_price, max_price),
            f"find by price range: {min_price} - {max_price}",
        )

    def find_by_status(self, status: ProductStatus | None) -> list[ProductResponse]:
        return self.query_executor.execute_specification_query(
            product_specs.has_status(status), f"find by status: {status}"
        )

    def find_by_category_and_availability(
        self, category: str | None, availability: bool | None
    ) -> list[ProductResponse]:
        specification = product_specs.has_category(category) & product_specs.has_availability(
            availability
        )
        return self.query_executor.execute_specification_query(
            specification,
            f"find by category: {category} and availability: {availability}",
        )

    def find_available_products_above_price(
        self, min_price: float | None
    ) -> list[ProductResponse]:
        """판매 가능하면서 가격이 min_price보다 큰 상품 (경계 미포함)"""
        specification = product_specs.is_available() & product_specs.has_price_greater_than(
            min_price
        )
        return self.query_executor.execute_specification_query(
            specification, f"find available products above price: {min_price}"
        )
