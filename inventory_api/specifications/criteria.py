"""
검색 조건 객체를 하나의 Specification으로 컴파일합니다.

필드는 정해진 순서대로 검사하며, 값이 있는 필드만 조건 목록에 추가한 뒤
universal 조건에서 시작해 AND로 결합합니다. 모든 필드가 비어 있으면
결과는 universal 조건(전체 조회)입니다.
"""

from inventory_api.schemas.search import InventorySearchCriteria, ProductSearchCriteria
from inventory_api.specifications import inventory_specs, product_specs
from inventory_api.specifications.base import Specification, has_text


def compile_product_criteria(criteria: ProductSearchCriteria | None) -> Specification:
    """
    상품 검색 조건 컴파일

    순서: keyword, name, category, status, price range, availability, active

    Args:
        criteria: 상품 검색 조건 (None이면 전체 조회)

    Returns:
        결합된 Specification
    """
    if criteria is None:
        return Specification.universal()

    specifications: list[Specification] = []

    if has_text(criteria.keyword):
        specifications.append(product_specs.search_by_keyword(criteria.keyword))
    if has_text(criteria.name):
        specifications.append(product_specs.has_name(criteria.name))
    if has_text(criteria.category):
        specifications.append(product_specs.has_category(criteria.category))
    if criteria.status is not None:
        specifications.append(product_specs.has_status(criteria.status))
    if criteria.min_price is not None or criteria.max_price is not None:
        specifications.append(
            product_specs.has_price_between(criteria.min_price, criteria.max_price)
        )
    if criteria.availability is not None:
        specifications.append(product_specs.has_availability(criteria.availability))
    # active=False는 필터링하지 않음
    if criteria.active is True:
        specifications.append(product_specs.is_active())

    return Specification.all_of(*specifications)


def compile_inventory_criteria(criteria: InventorySearchCriteria | None) -> Specification:
    """
    재고 검색 조건 컴파일

    순서: product_id, stock range
    """
    if criteria is None:
        return Specification.universal()

    specifications: list[Specification] = []

    if criteria.product_id is not None:
        specifications.append(inventory_specs.has_product_id(criteria.product_id))
    if criteria.min_stock is not None or criteria.max_stock is not None:
        specifications.append(
            inventory_specs.has_stock_between(criteria.min_stock, criteria.max_stock)
        )

    return Specification.all_of(*specifications)
