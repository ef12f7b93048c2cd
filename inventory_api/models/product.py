"""
Product 모델
"""

import enum

from sqlalchemy import Column, Enum, Float, Integer, String

from inventory_api.core.constants import (
    MAX_CATEGORY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
)
from inventory_api.db.database import Base


class ProductStatus(str, enum.Enum):
    """상품 판매 상태"""

    AVAILABLE = "AVAILABLE"
    NOT_AVAILABLE = "NOT_AVAILABLE"


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key)
        name: 상품명 (Not Null)
        description: 상품 설명 (Nullable)
        category: 카테고리 (Nullable)
        price: 가격 (Nullable, 값이 있으면 0 이상)
        status: 판매 상태 (Not Null, 기본값 AVAILABLE)
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    description = Column(String(MAX_DESCRIPTION_LENGTH), nullable=True)
    category = Column(String(MAX_CATEGORY_LENGTH), nullable=True, index=True)
    price = Column(Float, nullable=True)
    status = Column(
        Enum(ProductStatus, name="product_status"),
        nullable=False,
        default=ProductStatus.AVAILABLE,
    )

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
