"""
상품 검색 API 엔드포인트

검색 결과가 없으면 404가 아닌 빈 리스트를 반환합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from inventory_api.api.deps import get_page_request, get_product_search_service
from inventory_api.models import ProductStatus
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.product import ProductResponse
from inventory_api.schemas.search import ProductSearchCriteria
from inventory_api.services import ProductSearchService

router = APIRouter()


@router.post("/advanced", response_model=List[ProductResponse])
def advanced_search(
    criteria: ProductSearchCriteria,
    service: ProductSearchService = Depends(get_product_search_service),
):
    """
    여러 조건을 조합하여 상품을 검색합니다.

    지정한 조건은 모두 AND로 결합되며, 빈 조건이면 전체 상품을 반환합니다.

    Example:
        Request:
        ```json
        {
            "keyword": "laptop",
            "min_price": 100,
            "availability": true
        }
        ```
    """
    return service.search_products(criteria)


@router.post("/advanced/paged", response_model=Page[ProductResponse])
def advanced_search_paged(
    criteria: ProductSearchCriteria,
    page_request: PageRequest = Depends(get_page_request),
    service: ProductSearchService = Depends(get_product_search_service),
):
    """다중 조건 검색 결과를 페이지 단위로 조회합니다."""
    return service.search_products_paged(criteria, page_request)


@router.get("/keyword", response_model=List[ProductResponse])
def search_by_keyword(
    keyword: str = Query(..., description="이름/설명/카테고리 검색어"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_by_keyword(keyword)


@router.get("/name", response_model=List[ProductResponse])
def search_by_name(
    name: str = Query(..., description="상품명 (부분 일치)"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_by_name(name)


@router.get("/category", response_model=List[ProductResponse])
def search_by_category(
    category: str = Query(..., description="카테고리 (대소문자 무시 일치)"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_by_category(category)


@router.get("/category-availability", response_model=List[ProductResponse])
def search_by_category_and_availability(
    category: str | None = Query(None, description="카테고리"),
    availability: bool | None = Query(None, description="판매 가능 여부"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_by_category_and_availability(category, availability)


@router.get("/price-range", response_model=List[ProductResponse])
def search_by_price_range(
    min_price: float | None = Query(None, description="최소 가격 (포함)"),
    max_price: float | None = Query(None, description="최대 가격 (포함)"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    """
    가격 범위로 검색합니다.

    한쪽 경계만 지정하면 해당 방향으로만 제한합니다.
    """
    return service.find_by_price_range(min_price, max_price)


@router.get("/status", response_model=List[ProductResponse])
def search_by_status(
    status: ProductStatus = Query(..., description="판매 상태"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_by_status(status)


@router.get("/available-above", response_model=List[ProductResponse])
def search_available_above_price(
    min_price: float = Query(..., description="기준 가격 (미포함)"),
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_available_products_above_price(min_price)


@router.get("/active", response_model=List[ProductResponse])
def search_active_products(
    service: ProductSearchService = Depends(get_product_search_service),
):
    return service.find_active_products()
