"""
검색 조건 스키마

모든 필드는 선택 사항이며, 값이 없으면 해당 조건으로 필터링하지 않습니다.
"""

from pydantic import BaseModel, Field

from inventory_api.models.product import ProductStatus


class ProductSearchCriteria(BaseModel):
    """
    상품 검색 조건

    Example:
        {
            "keyword": "laptop",
            "min_price": 100,
            "max_price": 500,
            "availability": true
        }
    """

    keyword: str | None = Field(None, description="이름/설명/카테고리 부분 일치 검색어")
    name: str | None = Field(None, description="상품명 부분 일치")
    category: str | None = Field(None, description="카테고리 일치 (대소문자 무시)")
    status: ProductStatus | None = Field(None, description="판매 상태")
    min_price: float | None = Field(None, description="최소 가격 (포함)")
    max_price: float | None = Field(None, description="최대 가격 (포함)")
    availability: bool | None = Field(None, description="판매 가능 여부")
    active: bool | None = Field(None, description="true일 때만 활성 상품으로 제한")


class InventorySearchCriteria(BaseModel):
    """
    재고 검색 조건

    Example:
        {
            "product_id": 1,
            "min_stock": 10
        }
    """

    product_id: int | None = Field(None, description="상품 ID")
    min_stock: int | None = Field(None, description="최소 재고 (포함)")
    max_stock: int | None = Field(None, description="최대 재고 (포함)")
