"""
재고 검색 조건 모음
"""

from inventory_api.specifications.base import Specification


def has_product_id(product_id: int | None) -> Specification:
    if product_id is None:
        return Specification.universal()
    return Specification(
        lambda model: model.product_id == product_id, f"product_id = {product_id}"
    )


def has_stock_between(min_stock: int | None, max_stock: int | None) -> Specification:
    """
    재고 범위 조건 (경계 포함)

    한쪽 경계만 주어지면 해당 방향으로만 제한합니다.
    """
    if min_stock is None and max_stock is None:
        return Specification.universal()
    if min_stock is None:
        return Specification(
            lambda model: model.current_stock <= max_stock, f"stock <= {max_stock}"
        )
    if max_stock is None:
        return Specification(
            lambda model: model.current_stock >= min_stock, f"stock >= {min_stock}"
        )
    return Specification(
        lambda model: model.current_stock.between(min_stock, max_stock),
        f"stock between {min_stock} and {max_stock}",
    )


def has_stock_greater_than(min_stock: int | None) -> Specification:
    """재고 > min_stock (경계 미포함)"""
    if min_stock is None:
        return Specification.universal()
    return Specification(
        lambda model: model.current_stock > min_stock, f"stock > {min_stock}"
    )
