"""재고 관리 서비스."""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from inventory_api.core.config import Settings, get_settings
from inventory_api.core.constants import PRODUCT_NOT_FOUND_MESSAGE, STOCK_LEVEL_NULL_MESSAGE
from inventory_api.core.exceptions import (
    InvalidArgumentException,
    InventoryNotFoundException,
)
from inventory_api.db.database import transaction
from inventory_api.models import Inventory
from inventory_api.repositories import InventoryRepository, ProductRepository
from inventory_api.schemas.inventory import InventoryRequest, InventoryResponse
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.services.query_executor import QueryExecutor
from inventory_api.validators import InventoryValidator

logger = logging.getLogger(__name__)


class InventoryService:
    """
    재고 생성, 조회, 수정, 삭제 서비스

    재고가 참조하는 상품의 존재 여부는 저장 전에 명시적으로 확인합니다.
    같은 재고 레코드에 대한 동시 수정은 직렬화하지 않습니다 (마지막 쓰기 우선).

    Args:
        db: DB 세션
        settings: 애플리케이션 설정 (validator 미지정 시 max_stock 사용)
        validator: 요청 검증기
        clock: last_updated에 기록할 현재 시각 함수
    """

    def __init__(
        self,
        db: Session,
        settings: Optional[Settings] = None,
        validator: Optional[InventoryValidator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        settings = settings or get_settings()
        self.db = db
        self.clock = clock
        self.repository = InventoryRepository(db)
        self.product_repository = ProductRepository(db)
        self.validator = validator or InventoryValidator(max_stock=settings.max_stock)
        self.query_executor = QueryExecutor(self.repository, InventoryResponse)

    def find_all_inventories(self) -> list[InventoryResponse]:
        return self.query_executor.execute_simple_query("find all inventories")

    def find_all_inventories_paged(self, page_request: PageRequest) -> Page[InventoryResponse]:
        return self.query_executor.execute_paged_query(
            page_request, "find all inventories with pagination"
        )

    def find_inventory_by_id(self, inventory_id: int) -> InventoryResponse:
        """
        ID로 재고를 조회합니다.

        Raises:
            ValidationException: ID가 양수가 아닌 경우
            InventoryNotFoundException: 재고가 없는 경우
        """
        logger.debug("Finding inventory by id: %s", inventory_id)
        self.validator.validate_id(inventory_id)
        inventory = self._get_inventory_or_raise(inventory_id)
        return InventoryResponse.model_validate(inventory)

    def create_inventory(self, request: InventoryRequest) -> InventoryResponse:
        """
        재고를 생성합니다.

        플로우:
        1. 요청 검증
        2. 참조 상품 존재 확인
        3. last_updated 기록 후 저장

        Raises:
            ValidationException: 요청이 검증 규칙을 위반한 경우
            InvalidArgumentException: 참조 상품이 없는 경우
        """
        logger.debug("Creating new inventory: %s", request)
        self.validator.validate_create_request(request)

        with transaction(self.db):
            self._verify_product_exists(request.product_id)
            inventory = Inventory(
                product_id=request.product_id,
                current_stock=request.current_stock,
                last_updated=self.clock(),
            )
            saved = self.repository.save(inventory)

        logger.info("Inventory created successfully with id: %s", saved.id)
        return InventoryResponse.model_validate(saved)

    def update_inventory(self, inventory_id: int, request: InventoryRequest) -> InventoryResponse:
        """
        재고를 수정합니다.

        product_id가 기존 값과 다르면 새 상품의 존재를 다시 확인합니다.

        Raises:
            ValidationException: ID 또는 요청이 검증 규칙을 위반한 경우
            InventoryNotFoundException: 재고가 없는 경우
            InvalidArgumentException: 새 참조 상품이 없는 경우
        """
        logger.debug("Updating inventory with id: %s", inventory_id)
        self.validator.validate_id(inventory_id)
        self.validator.validate_update_request(request)

        with transaction(self.db):
            inventory = self._get_inventory_or_raise(inventory_id)

            if request.product_id is not None and request.product_id != inventory.product_id:
                self._verify_product_exists(request.product_id)
                inventory.product_id = request.product_id
            if request.current_stock is not None:
                inventory.current_stock = request.current_stock

            inventory.last_updated = self.clock()
            saved = self.repository.save(inventory)

        logger.info("Inventory updated successfully with id: %s", inventory_id)
        return InventoryResponse.model_validate(saved)

    def update_stock_level(self, inventory_id: int, new_stock_level: Optional[int]) -> InventoryResponse:
        """
        재고 수량만 변경합니다.

        Raises:
            ValidationException: ID가 잘못되었거나 수량이 허용 범위를 벗어난 경우
            InvalidArgumentException: 수량이 None인 경우
            InventoryNotFoundException: 재고가 없는 경우
        """
        logger.debug(
            "Updating stock level for inventory id: %s to: %s", inventory_id, new_stock_level
        )
        self.validator.validate_id(inventory_id)
        if new_stock_level is None:
            raise InvalidArgumentException(STOCK_LEVEL_NULL_MESSAGE)
        self.validator.validate_stock_level(new_stock_level)

        with transaction(self.db):
            inventory = self._get_inventory_or_raise(inventory_id)
            inventory.current_stock = new_stock_level
            inventory.last_updated = self.clock()
            saved = self.repository.save(inventory)

        logger.info("Stock level updated successfully for inventory id: %s", inventory_id)
        return InventoryResponse.model_validate(saved)

    def delete_inventory(self, inventory_id: int) -> None:
        """
        재고를 삭제합니다.

        Raises:
            ValidationException: ID가 양수가 아닌 경우
            InventoryNotFoundException: 재고가 없는 경우
        """
        logger.debug("Deleting inventory with id: %s", inventory_id)
        self.validator.validate_id(inventory_id)

        with transaction(self.db):
            self._get_inventory_or_raise(inventory_id)
            self.repository.delete_by_id(inventory_id)

        logger.info("Inventory deleted successfully with id: %s", inventory_id)

    def _get_inventory_or_raise(self, inventory_id: int) -> Inventory:
        inventory = self.repository.get(inventory_id)
        if inventory is None:
            raise InventoryNotFoundException(inventory_id)
        return inventory

    def _verify_product_exists(self, product_id: int) -> None:
        if not self.product_repository.exists_by_id(product_id):
            raise InvalidArgumentException(PRODUCT_NOT_FOUND_MESSAGE.format(product_id))
