"""상품 관리 서비스."""

import logging

from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ProductNotFoundException
from inventory_api.db.database import transaction
from inventory_api.models import Product, ProductStatus
from inventory_api.repositories import ProductRepository
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.product import ProductRequest, ProductResponse
from inventory_api.services.query_executor import QueryExecutor
from inventory_api.validators import ProductValidator

logger = logging.getLogger(__name__)

# None으로 덮어쓸 수 없는 필드
_NON_NULLABLE_FIELDS = {"name", "price", "status"}


class ProductService:
    """
    상품 생성, 조회, 수정, 삭제 서비스

    쓰기 작업은 검증 → 조회 → 저장 순서로 하나의 트랜잭션 안에서 수행합니다.
    """

    def __init__(self, db: Session, validator: ProductValidator | None = None):
        self.db = db
        self.repository = ProductRepository(db)
        self.validator = validator or ProductValidator()
        self.query_executor = QueryExecutor(self.repository, ProductResponse)

    def find_all_products(self) -> list[ProductResponse]:
        return self.query_executor.execute_simple_query("find all products")

    def find_all_products_paged(self, page_request: PageRequest) -> Page[ProductResponse]:
        return self.query_executor.execute_paged_query(
            page_request, "find all products with pagination"
        )

    def find_product_by_id(self, product_id: int) -> ProductResponse:
        """
        ID로 상품을 조회합니다.

        Raises:
            ValidationException: ID가 양수가 아닌 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        logger.debug("Finding product by id: %s", product_id)
        self.validator.validate_id(product_id)
        product = self._get_product_or_raise(product_id)
        return ProductResponse.model_validate(product)

    def create_product(self, request: ProductRequest) -> ProductResponse:
        """
        상품을 생성합니다. 상태가 없으면 AVAILABLE로 저장합니다.

        Args:
            request: 상품 생성 요청

        Returns:
            생성된 상품 정보

        Raises:
            ValidationException: 요청이 검증 규칙을 위반한 경우
        """
        logger.debug("Creating new product: %s", request)
        self.validator.validate_create_request(request)

        with transaction(self.db):
            product = Product(
                name=request.name,
                description=request.description,
                category=request.category,
                price=request.price,
                status=request.status or ProductStatus.AVAILABLE,
            )
            saved = self.repository.save(product)

        logger.info("Product created successfully with id: %s", saved.id)
        return ProductResponse.model_validate(saved)

    def update_product(self, product_id: int, request: ProductRequest) -> ProductResponse:
        """
        상품을 수정합니다.

        요청에서 명시적으로 지정한 필드만 기존 레코드에 덮어씁니다.

        Raises:
            ValidationException: ID 또는 요청이 검증 규칙을 위반한 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        logger.debug("Updating product with id: %s", product_id)
        self.validator.validate_id(product_id)
        self.validator.validate_update_request(request)

        with transaction(self.db):
            product = self._get_product_or_raise(product_id)
            for field, value in request.model_dump(exclude_unset=True).items():
                if value is None and field in _NON_NULLABLE_FIELDS:
                    continue
                setattr(product, field, value)
            saved = self.repository.save(product)

        logger.info("Product updated successfully with id: %s", product_id)
        return ProductResponse.model_validate(saved)

    def update_product_status(
        self, product_id: int, status: ProductStatus | None
    ) -> ProductResponse:
        """
        상품 판매 상태만 변경합니다.

        Raises:
            ValidationException: ID가 잘못되었거나 상태가 None인 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        logger.debug("Updating product status for id: %s to status: %s", product_id, status)
        self.validator.validate_id(product_id)
        self.validator.validate_status(status)

        with transaction(self.db):
            product = self._get_product_or_raise(product_id)
            product.status = status
            saved = self.repository.save(product)

        logger.info("Product status updated successfully for id: %s", product_id)
        return ProductResponse.model_validate(saved)

    def delete_product(self, product_id: int) -> None:
        """
        상품을 삭제합니다.

        Raises:
            ValidationException: ID가 양수가 아닌 경우
            ProductNotFoundException: 상품이 없는 경우
        """
        logger.debug("Deleting product with id: %s", product_id)
        self.validator.validate_id(product_id)

        with transaction(self.db):
            self._get_product_or_raise(product_id)
            self.repository.delete_by_id(product_id)

        logger.info("Product deleted successfully with id: %s", product_id)

    def _get_product_or_raise(self, product_id: int) -> Product:
        product = self.repository.get(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product
