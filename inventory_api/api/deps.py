"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 설정, 서비스, 페이지 요청 등의 의존성을 제공합니다.
"""

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from inventory_api.core.config import Settings, get_settings
from inventory_api.core.exceptions import InvalidArgumentException
from inventory_api.db.database import get_db
from inventory_api.schemas.pagination import PageRequest
from inventory_api.services import (
    InventorySearchService,
    InventoryService,
    ProductSearchService,
    ProductService,
)

__all__ = [
    "get_db",
    "get_page_request",
    "get_product_service",
    "get_product_search_service",
    "get_inventory_service",
    "get_inventory_search_service",
]


def get_page_request(
    page: int = Query(0, ge=0, description="페이지 번호 (0부터 시작)"),
    size: int | None = Query(None, ge=1, description="페이지 크기"),
    sort: list[str] = Query(default=[], description="정렬 조건 (예: name,desc)"),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    """
    쿼리 파라미터로부터 PageRequest를 생성합니다.

    Raises:
        InvalidArgumentException: size가 max_page_size를 넘는 경우
    """
    size = size or settings.default_page_size
    if size > settings.max_page_size:
        raise InvalidArgumentException(
            f"Page size cannot exceed {settings.max_page_size}"
        )
    return PageRequest(page=page, size=size, sort=sort)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_product_search_service(db: Session = Depends(get_db)) -> ProductSearchService:
    return ProductSearchService(db)


def get_inventory_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> InventoryService:
    return InventoryService(db, settings=settings)


def get_inventory_search_service(db: Session = Depends(get_db)) -> InventorySearchService:
    return InventorySearchService(db)
