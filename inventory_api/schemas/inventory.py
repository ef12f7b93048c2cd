"""
재고 관련 Pydantic 스키마
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InventoryRequest(BaseModel):
    """
    재고 생성/수정 요청 스키마

    수정 시 product_id를 생략하면 기존 상품 연결을 유지합니다.

    Example:
        {
            "product_id": 1,
            "current_stock": 120
        }
    """

    product_id: int | None = Field(None, description="상품 ID", examples=[1])
    current_stock: int | None = Field(None, description="현재 재고 수량", examples=[120])


class StockLevelUpdate(BaseModel):
    """재고 수량 변경 요청 스키마"""

    current_stock: int | None = Field(None, description="새 재고 수량", examples=[80])


class InventoryResponse(BaseModel):
    """
    재고 정보 응답 스키마

    Example:
        {
            "id": 1,
            "product_id": 1,
            "current_stock": 120,
            "last_updated": "2025-01-22T10:30:00"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="재고 레코드 ID")
    product_id: int = Field(..., description="상품 ID")
    current_stock: int = Field(..., description="현재 재고 수량")
    last_updated: datetime | None = Field(None, description="마지막 변경 일시")
