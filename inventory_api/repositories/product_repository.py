"""상품 저장소."""

from inventory_api.models.product import Product
from inventory_api.repositories.base import Repository


class ProductRepository(Repository[Product]):
    """products 테이블 저장소"""

    model = Product
