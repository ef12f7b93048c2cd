"""
상품 요청 검증

쓰기 작업 전에 필드 규칙을 검사하며, 위반 시 ValidationException을 발생시킵니다.
값을 보정하지 않습니다.
"""

from typing import Optional

from inventory_api.core.constants import (
    MAX_CATEGORY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MIN_PRICE,
    PRODUCT_CATEGORY_TOO_LONG_MESSAGE,
    PRODUCT_DESCRIPTION_TOO_LONG_MESSAGE,
    PRODUCT_ID_INVALID_MESSAGE,
    PRODUCT_NAME_REQUIRED_MESSAGE,
    PRODUCT_NAME_TOO_LONG_MESSAGE,
    PRODUCT_PRICE_NEGATIVE_MESSAGE,
    PRODUCT_REQUEST_NULL_MESSAGE,
    PRODUCT_STATUS_NULL_MESSAGE,
)
from inventory_api.core.exceptions import ValidationException
from inventory_api.models.product import ProductStatus
from inventory_api.schemas.product import ProductRequest
from inventory_api.specifications.base import has_text


class ProductValidator:
    """상품 요청 검증기"""

    def validate_create_request(self, request: Optional[ProductRequest]) -> None:
        """
        상품 생성 요청을 검증합니다.

        Raises:
            ValidationException: 요청이 None이거나, 이름이 비어 있거나 너무 긴 경우,
                가격이 음수인 경우, 설명/카테고리가 최대 길이를 넘는 경우
        """
        if request is None:
            raise ValidationException(PRODUCT_REQUEST_NULL_MESSAGE)
        self._validate_name(request.name)
        self._validate_price(request.price)
        self._validate_description(request.description)
        self._validate_category(request.category)

    def validate_update_request(self, request: Optional[ProductRequest]) -> None:
        """상품 수정 요청은 생성과 동일한 규칙으로 검증합니다."""
        self.validate_create_request(request)

    def validate_status(self, status: Optional[ProductStatus]) -> None:
        if status is None:
            raise ValidationException(PRODUCT_STATUS_NULL_MESSAGE)

    def validate_id(self, product_id: Optional[int]) -> None:
        if product_id is None or product_id <= 0:
            raise ValidationException(PRODUCT_ID_INVALID_MESSAGE)

    def _validate_name(self, name: Optional[str]) -> None:
        if not has_text(name):
            raise ValidationException(PRODUCT_NAME_REQUIRED_MESSAGE)
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationException(PRODUCT_NAME_TOO_LONG_MESSAGE.format(MAX_NAME_LENGTH))

    def _validate_price(self, price: Optional[float]) -> None:
        if price is not None and price < MIN_PRICE:
            raise ValidationException(PRODUCT_PRICE_NEGATIVE_MESSAGE)

    def _validate_description(self, description: Optional[str]) -> None:
        if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationException(
                PRODUCT_DESCRIPTION_TOO_LONG_MESSAGE.format(MAX_DESCRIPTION_LENGTH)
            )

    def _validate_category(self, category: Optional[str]) -> None:
        if category is not None and len(category) > MAX_CATEGORY_LENGTH:
            raise ValidationException(
                PRODUCT_CATEGORY_TOO_LONG_MESSAGE.format(MAX_CATEGORY_LENGTH)
            )
