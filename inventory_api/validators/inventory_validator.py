"""
재고 요청 검증
"""

from typing import Optional

from inventory_api.core.constants import (
    INVENTORY_ID_INVALID_MESSAGE,
    INVENTORY_REQUEST_NULL_MESSAGE,
    MAX_STOCK,
    MIN_STOCK,
    PRODUCT_ID_INVALID_MESSAGE,
    PRODUCT_ID_NULL_MESSAGE,
    STOCK_LEVEL_EXCEEDS_MAX_MESSAGE,
    STOCK_LEVEL_NEGATIVE_MESSAGE,
    STOCK_LEVEL_NULL_MESSAGE,
)
from inventory_api.core.exceptions import ValidationException
from inventory_api.schemas.inventory import InventoryRequest


class InventoryValidator:
    """
    재고 요청 검증기

    Args:
        max_stock: 허용되는 최대 재고 수량
    """

    def __init__(self, max_stock: int = MAX_STOCK):
        self.max_stock = max_stock

    def validate_create_request(self, request: Optional[InventoryRequest]) -> None:
        """
        재고 생성 요청을 검증합니다.

        product_id와 current_stock 모두 필수입니다.

        Raises:
            ValidationException: 규칙 위반 시
        """
        if request is None:
            raise ValidationException(INVENTORY_REQUEST_NULL_MESSAGE)
        self._validate_product_id(request.product_id)
        if request.current_stock is None:
            raise ValidationException(STOCK_LEVEL_NULL_MESSAGE)
        self.validate_stock_level(request.current_stock)

    def validate_update_request(self, request: Optional[InventoryRequest]) -> None:
        """
        재고 수정 요청을 검증합니다.

        수정 시 product_id는 선택이며, current_stock은 값이 있을 때만 범위를 확인합니다.
        """
        if request is None:
            raise ValidationException(INVENTORY_REQUEST_NULL_MESSAGE)
        if request.current_stock is not None:
            self.validate_stock_level(request.current_stock)

    def validate_id(self, inventory_id: Optional[int]) -> None:
        if inventory_id is None or inventory_id <= 0:
            raise ValidationException(INVENTORY_ID_INVALID_MESSAGE)

    def validate_stock_level(self, stock: int) -> None:
        """재고 수량이 [0, max_stock] 범위인지 확인합니다."""
        if stock < MIN_STOCK:
            raise ValidationException(STOCK_LEVEL_NEGATIVE_MESSAGE)
        if stock > self.max_stock:
            raise ValidationException(STOCK_LEVEL_EXCEEDS_MAX_MESSAGE.format(self.max_stock))

    def _validate_product_id(self, product_id: Optional[int]) -> None:
        if product_id is None:
            raise ValidationException(PRODUCT_ID_NULL_MESSAGE)
        if product_id <= 0:
            raise ValidationException(PRODUCT_ID_INVALID_MESSAGE)
