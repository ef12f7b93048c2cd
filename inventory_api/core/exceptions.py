"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
데이터베이스(SQLAlchemy) 오류는 변환하지 않고 그대로 전파합니다.
"""

from inventory_api.core.constants import (
    INVENTORY_NOT_FOUND_MESSAGE,
    PRODUCT_NOT_FOUND_MESSAGE,
)


class InvalidArgumentException(Exception):
    """
    잘못되었거나 누락된 입력값으로 요청을 처리할 수 없을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(InvalidArgumentException):
    """
    Validator가 필드 규칙 위반을 발견했을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """


class ResourceNotFoundException(Exception):
    """
    ID에 해당하는 레코드가 존재하지 않을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ProductNotFoundException(ResourceNotFoundException):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(PRODUCT_NOT_FOUND_MESSAGE.format(product_id))


class InventoryNotFoundException(ResourceNotFoundException):
    """
    재고 레코드를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, inventory_id: int):
        self.inventory_id = inventory_id
        super().__init__(INVENTORY_NOT_FOUND_MESSAGE.format(inventory_id))
