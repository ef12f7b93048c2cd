"""Tests for inventory specifications."""

import pytest

from inventory_api.models import Inventory
from inventory_api.specifications import inventory_specs


@pytest.fixture
def stock_levels(make_product, make_inventory):
    """재고 0, 10, 50, 100 네 건"""
    return [
        make_inventory(make_product(name=f"Product {stock}").id, current_stock=stock)
        for stock in (0, 10, 50, 100)
    ]


def stocks(db, specification) -> list[int]:
    query = db.query(Inventory).filter(specification(Inventory)).order_by(Inventory.id)
    return [inventory.current_stock for inventory in query]


class TestHasProductId:
    def test_matches_single_product(self, test_db, stock_levels):
        target = stock_levels[2]
        assert stocks(test_db, inventory_specs.has_product_id(target.product_id)) == [50]

    def test_none_matches_everything(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_product_id(None)) == [0, 10, 50, 100]


class TestHasStockBetween:
    """Test: 재고 범위 조건"""

    def test_both_absent(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_stock_between(None, None)) == [0, 10, 50, 100]

    def test_only_min(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_stock_between(10, None)) == [10, 50, 100]

    def test_only_max(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_stock_between(None, 10)) == [0, 10]

    def test_inclusive_bounds(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_stock_between(10, 50)) == [10, 50]


class TestHasStockGreaterThan:
    def test_is_strict(self, test_db, stock_levels):
        assert stocks(test_db, inventory_specs.has_stock_greater_than(10)) == [50, 100]

    def test_none_matches_everything(self, test_db, stock_levels):
        assert len(stocks(test_db, inventory_specs.has_stock_greater_than(None))) == 4
