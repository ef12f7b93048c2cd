"""
상품 검색 조건 모음

값이 없거나 공백 문자열이면 모든 상품과 일치하는 universal 조건을 반환합니다.
텍스트 비교는 대소문자를 구분하지 않으며, 검색어의 %, _ 는 문자 그대로 취급합니다.
"""

from sqlalchemy import func, or_

from inventory_api.models.product import ProductStatus
from inventory_api.specifications.base import Specification, has_text


def has_name(name: str | None) -> Specification:
    """상품명 부분 일치"""
    if not has_text(name):
        return Specification.universal()
    return Specification(
        lambda model: model.name.icontains(name, autoescape=True), f"name contains '{name}'"
    )


def has_exact_name(name: str | None) -> Specification:
    """상품명 전체 일치"""
    if not has_text(name):
        return Specification.universal()
    return Specification(
        lambda model: func.lower(model.name) == name.lower(), f"name = '{name}'"
    )


def has_category(category: str | None) -> Specification:
    """카테고리 일치"""
    if not has_text(category):
        return Specification.universal()
    return Specification(
        lambda model: func.lower(model.category) == category.lower(),
        f"category = '{category}'",
    )


def has_status(status: ProductStatus | None) -> Specification:
    if status is None:
        return Specification.universal()
    return Specification(lambda model: model.status == status, f"status = {status.value}")


def has_price_greater_than(min_price: float | None) -> Specification:
    """가격 > min_price (경계 미포함)"""
    if min_price is None:
        return Specification.universal()
    return Specification(lambda model: model.price > min_price, f"price > {min_price}")


def has_price_less_than(max_price: float | None) -> Specification:
    """가격 < max_price (경계 미포함)"""
    if max_price is None:
        return Specification.universal()
    return Specification(lambda model: model.price < max_price, f"price < {max_price}")


def has_price_between(min_price: float | None, max_price: float | None) -> Specification:
    """
    가격 범위 조건 (경계 포함)

    - 둘 다 있음: min_price <= price <= max_price
    - min_price만 있음: price >= min_price
    - max_price만 있음: price <= max_price
    - 둘 다 없음: universal
    """
    if min_price is None and max_price is None:
        return Specification.universal()
    if min_price is None:
        return Specification(lambda model: model.price <= max_price, f"price <= {max_price}")
    if max_price is None:
        return Specification(lambda model: model.price >= min_price, f"price >= {min_price}")
    return Specification(
        lambda model: model.price.between(min_price, max_price),
        f"price between {min_price} and {max_price}",
    )


def search_by_keyword(keyword: str | None) -> Specification:
    """이름, 설명, 카테고리 중 하나라도 검색어를 포함하면 일치"""
    if not has_text(keyword):
        return Specification.universal()
    return Specification(
        lambda model: or_(
            model.name.icontains(keyword, autoescape=True),
            model.description.icontains(keyword, autoescape=True),
            model.category.icontains(keyword, autoescape=True),
        ),
        f"keyword '{keyword}'",
    )


# 판매 가능/활성 여부는 별도 컬럼 없이 status 값으로 판단합니다.
# 현재는 두 개념 모두 AVAILABLE 상태를 의미합니다.


def is_available() -> Specification:
    return Specification(
        lambda model: model.status == ProductStatus.AVAILABLE, "available"
    )


def is_active() -> Specification:
    return Specification(lambda model: model.status == ProductStatus.AVAILABLE, "active")


def has_availability(availability: bool | None) -> Specification:
    """availability=True면 판매 가능 상품, False면 그 외 상태의 상품"""
    if availability is None:
        return Specification.universal()
    if availability:
        return is_available()
    return ~is_available()


def is_active_and_available() -> Specification:
    return is_active() & is_available()
