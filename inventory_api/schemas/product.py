"""
상품 관련 Pydantic 스키마

요청/응답 모델을 정의합니다. 필드 규칙은 ProductValidator가 검증하므로
요청 스키마에는 타입만 선언합니다.
"""

from pydantic import BaseModel, ConfigDict, Field

from inventory_api.models.product import ProductStatus


class ProductRequest(BaseModel):
    """
    상품 생성/수정 요청 스키마

    Example:
        {
            "name": "Gaming Laptop",
            "description": "15인치 게이밍 노트북",
            "category": "Electronics",
            "price": 1899.0,
            "status": "AVAILABLE"
        }
    """

    name: str | None = Field(None, description="상품명 (필수, 255자 이하)", examples=["Gaming Laptop"])
    description: str | None = Field(None, description="상품 설명 (1000자 이하)")
    category: str | None = Field(None, description="카테고리 (100자 이하)", examples=["Electronics"])
    price: float | None = Field(None, description="가격 (0 이상)", examples=[1899.0])
    status: ProductStatus | None = Field(None, description="판매 상태 (생략 시 AVAILABLE)")


class ProductStatusUpdate(BaseModel):
    """상품 상태 변경 요청 스키마"""

    status: ProductStatus | None = Field(None, description="변경할 판매 상태")


class ProductResponse(BaseModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Gaming Laptop",
            "category": "Electronics",
            "description": "15인치 게이밍 노트북",
            "price": 1899.0,
            "status": "AVAILABLE"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    category: str | None = Field(None, description="카테고리")
    description: str | None = Field(None, description="상품 설명")
    price: float | None = Field(None, description="가격")
    status: ProductStatus = Field(..., description="판매 상태")
