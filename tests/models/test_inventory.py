"""
Inventory 모델 테스트
"""

import pytest
from sqlalchemy.exc import IntegrityError

from inventory_api.models import Inventory

from conftest import FIXED_NOW


class TestInventoryModel:
    """Inventory 모델 테스트 클래스"""

    def test_create_inventory(self, make_product, make_inventory):
        product = make_product()

        inventory = make_inventory(product.id, current_stock=42)

        assert inventory.id is not None
        assert inventory.current_stock == 42
        assert inventory.last_updated == FIXED_NOW

    def test_product_relationship(self, make_product, make_inventory):
        """Test: 상품과 재고는 1:1 관계"""
        product = make_product(name="Desk")
        inventory = make_inventory(product.id)

        assert inventory.product.name == "Desk"
        assert product.inventory.id == inventory.id

    def test_one_inventory_per_product(self, test_db, make_product, make_inventory):
        """Test: 같은 상품에 두 번째 재고 레코드는 저장 불가"""
        product = make_product()
        make_inventory(product.id)

        test_db.add(Inventory(product_id=product.id, current_stock=1))
        with pytest.raises(IntegrityError):
            test_db.commit()

    def test_current_stock_not_null(self, test_db, make_product):
        test_db.add(Inventory(product_id=make_product().id))

        with pytest.raises(IntegrityError):
            test_db.commit()
