"""
재고 검색 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from inventory_api.api.deps import get_inventory_search_service, get_page_request
from inventory_api.schemas.inventory import InventoryResponse
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.search import InventorySearchCriteria
from inventory_api.services import InventorySearchService

router = APIRouter()


@router.post("/advanced", response_model=List[InventoryResponse])
def advanced_search(
    criteria: InventorySearchCriteria,
    service: InventorySearchService = Depends(get_inventory_search_service),
):
    """
    여러 조건을 조합하여 재고를 검색합니다.

    Example:
        Request:
        ```json
        {
            "min_stock": 10,
            "max_stock": 100
        }
        ```
    """
    return service.search_inventories(criteria)


@router.post("/advanced/paged", response_model=Page[InventoryResponse])
def advanced_search_paged(
    criteria: InventorySearchCriteria,
    page_request: PageRequest = Depends(get_page_request),
    service: InventorySearchService = Depends(get_inventory_search_service),
):
    return service.search_inventories_paged(criteria, page_request)


@router.get("/product/{product_id}", response_model=List[InventoryResponse])
def search_by_product_id(
    product_id: int,
    service: InventorySearchService = Depends(get_inventory_search_service),
):
    return service.find_by_product_id(product_id)


@router.get("/stock-range", response_model=List[InventoryResponse])
def search_by_stock_range(
    min_stock: int | None = Query(None, description="최소 재고 (포함)"),
    max_stock: int | None = Query(None, description="최대 재고 (포함)"),
    service: InventorySearchService = Depends(get_inventory_search_service),
):
    return service.find_by_stock_range(min_stock, max_stock)


@router.get("/minimum-stock", response_model=List[InventoryResponse])
def search_by_minimum_stock(
    min_stock: int = Query(..., description="기준 재고 (미포함)"),
    service: InventorySearchService = Depends(get_inventory_search_service),
):
    return service.find_by_minimum_stock(min_stock)
