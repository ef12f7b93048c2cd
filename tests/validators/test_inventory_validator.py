"""Tests for InventoryValidator."""

import pytest

from inventory_api.core.exceptions import ValidationException
from inventory_api.schemas.inventory import InventoryRequest
from inventory_api.validators import InventoryValidator


@pytest.fixture
def validator():
    return InventoryValidator(max_stock=1_000_000)


class TestValidateCreateRequest:
    """Test: 재고 생성 요청 검증"""

    def test_valid_request(self, validator):
        validator.validate_create_request(InventoryRequest(product_id=1, current_stock=0))

    def test_null_request(self, validator):
        with pytest.raises(ValidationException, match="Inventory request cannot be null"):
            validator.validate_create_request(None)

    def test_product_id_required(self, validator):
        with pytest.raises(ValidationException, match="Product ID cannot be null"):
            validator.validate_create_request(InventoryRequest(current_stock=5))

    @pytest.mark.parametrize("product_id", [0, -1])
    def test_product_id_must_be_positive(self, validator, product_id):
        with pytest.raises(ValidationException, match="Product ID must be a positive number"):
            validator.validate_create_request(
                InventoryRequest(product_id=product_id, current_stock=5)
            )

    def test_stock_required(self, validator):
        with pytest.raises(ValidationException, match="Stock level cannot be null"):
            validator.validate_create_request(InventoryRequest(product_id=1))

    def test_negative_stock(self, validator):
        with pytest.raises(ValidationException, match="Stock level cannot be negative"):
            validator.validate_create_request(InventoryRequest(product_id=1, current_stock=-1))

    def test_stock_above_maximum(self, validator):
        with pytest.raises(ValidationException) as exc_info:
            validator.validate_create_request(
                InventoryRequest(product_id=1, current_stock=1_000_001)
            )
        assert exc_info.value.message == "Stock level exceeds maximum allowed: 1000000"

    def test_stock_at_maximum(self, validator):
        validator.validate_create_request(InventoryRequest(product_id=1, current_stock=1_000_000))

    def test_configured_maximum_is_used(self):
        validator = InventoryValidator(max_stock=50)
        with pytest.raises(ValidationException, match="maximum allowed: 50"):
            validator.validate_create_request(InventoryRequest(product_id=1, current_stock=51))


class TestValidateUpdateRequest:
    """Test: 재고 수정 요청 검증 (product_id 선택)"""

    def test_empty_update_is_valid(self, validator):
        validator.validate_update_request(InventoryRequest())

    def test_stock_checked_when_present(self, validator):
        with pytest.raises(ValidationException, match="Stock level cannot be negative"):
            validator.validate_update_request(InventoryRequest(current_stock=-3))

    def test_null_request(self, validator):
        with pytest.raises(ValidationException):
            validator.validate_update_request(None)


class TestValidateId:
    @pytest.mark.parametrize("inventory_id", [None, 0, -5])
    def test_invalid_ids(self, validator, inventory_id):
        with pytest.raises(ValidationException, match="Inventory ID must be a positive number"):
            validator.validate_id(inventory_id)

    def test_valid_id(self, validator):
        validator.validate_id(1)
