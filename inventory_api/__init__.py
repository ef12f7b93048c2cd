"""상품 및 재고 관리 API"""

__version__ = "0.1.0"
