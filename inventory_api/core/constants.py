"""
상품/재고 도메인 상수

검증 한계값과 사용자에게 노출되는 오류 메시지를 정의합니다.
"""

# 상품
MIN_PRICE = 0.0
MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000
MAX_CATEGORY_LENGTH = 100

PRODUCT_NOT_FOUND_MESSAGE = "Product not found with id: {}"
PRODUCT_REQUEST_NULL_MESSAGE = "Product request cannot be null"
PRODUCT_NAME_REQUIRED_MESSAGE = "Product name is required"
PRODUCT_NAME_TOO_LONG_MESSAGE = "Product name cannot exceed {} characters"
PRODUCT_PRICE_NEGATIVE_MESSAGE = "Product price cannot be negative"
PRODUCT_DESCRIPTION_TOO_LONG_MESSAGE = "Product description cannot exceed {} characters"
PRODUCT_CATEGORY_TOO_LONG_MESSAGE = "Product category cannot exceed {} characters"
PRODUCT_STATUS_NULL_MESSAGE = "Product status cannot be null"
PRODUCT_ID_INVALID_MESSAGE = "Product ID must be a positive number"

# 재고
MIN_STOCK = 0
MAX_STOCK = 1_000_000

INVENTORY_NOT_FOUND_MESSAGE = "Inventory not found with id: {}"
INVENTORY_REQUEST_NULL_MESSAGE = "Inventory request cannot be null"
INVENTORY_ID_INVALID_MESSAGE = "Inventory ID must be a positive number"
PRODUCT_ID_NULL_MESSAGE = "Product ID cannot be null"
STOCK_LEVEL_NULL_MESSAGE = "Stock level cannot be null"
STOCK_LEVEL_NEGATIVE_MESSAGE = "Stock level cannot be negative"
STOCK_LEVEL_EXCEEDS_MAX_MESSAGE = "Stock level exceeds maximum allowed: {}"
