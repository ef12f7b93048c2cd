"""
Inventory 모델
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import backref, relationship

from inventory_api.db.database import Base


class Inventory(Base):
    """
    재고 모델

    Attributes:
        id: 재고 레코드 고유 ID (Primary Key)
        product_id: 상품 ID (Foreign Key to products.id, Unique, Not Null)
        current_stock: 현재 재고 수량 (Not Null)
        last_updated: 마지막 변경 일시 (서비스에서 설정)
        product: Product 모델과의 1:1 관계
    """

    __tablename__ = "inventories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    product_id = Column(
        Integer, ForeignKey("products.id"), nullable=False, unique=True, index=True
    )
    current_stock = Column(Integer, nullable=False)
    last_updated = Column(DateTime, nullable=True)

    # Relationships
    product = relationship("Product", backref=backref("inventory", uselist=False))

    def __repr__(self) -> str:
        """Inventory 객체의 문자열 표현"""
        return (
            f"<Inventory(id={self.id}, product_id={self.product_id}, "
            f"current_stock={self.current_stock})>"
        )

    def __str__(self) -> str:
        return f"Inventory: {self.current_stock} item(s) of product {self.product_id}"
