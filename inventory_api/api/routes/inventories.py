"""
재고 관리 API 엔드포인트

재고 생성, 조회, 수정, 재고 수량 변경, 삭제 기능을 제공합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from inventory_api.api.deps import get_inventory_service, get_page_request
from inventory_api.schemas.inventory import (
    InventoryRequest,
    InventoryResponse,
    StockLevelUpdate,
)
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.services import InventoryService

router = APIRouter()


@router.get("", response_model=List[InventoryResponse])
def list_inventories(service: InventoryService = Depends(get_inventory_service)):
    """모든 재고 목록을 조회합니다 (페이지네이션 없음)."""
    return service.find_all_inventories()


@router.get("/paged", response_model=Page[InventoryResponse])
def list_inventories_paged(
    page_request: PageRequest = Depends(get_page_request),
    service: InventoryService = Depends(get_inventory_service),
):
    """재고 목록을 페이지 단위로 조회합니다."""
    return service.find_all_inventories_paged(page_request)


@router.get("/{inventory_id}", response_model=InventoryResponse)
def get_inventory(
    inventory_id: int,
    service: InventoryService = Depends(get_inventory_service),
):
    """
    특정 재고 정보를 조회합니다.

    Raises:
        400: ID가 양수가 아닌 경우
        404: 재고를 찾을 수 없는 경우
    """
    return service.find_inventory_by_id(inventory_id)


@router.post("", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED)
def create_inventory(
    inventory_data: InventoryRequest,
    service: InventoryService = Depends(get_inventory_service),
):
    """
    새 재고 레코드를 생성합니다.

    Example:
        Request:
        ```json
        {
            "product_id": 1,
            "current_stock": 120
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "product_id": 1,
            "current_stock": 120,
            "last_updated": "2025-01-22T10:30:00"
        }
        ```

    Raises:
        400: 요청 검증 실패 또는 상품이 존재하지 않는 경우
    """
    return service.create_inventory(inventory_data)


@router.put("/{inventory_id}", response_model=InventoryResponse)
def update_inventory(
    inventory_id: int,
    inventory_data: InventoryRequest,
    service: InventoryService = Depends(get_inventory_service),
):
    """재고 레코드를 수정합니다. product_id를 생략하면 기존 상품을 유지합니다."""
    return service.update_inventory(inventory_id, inventory_data)


@router.patch("/{inventory_id}/stock", response_model=InventoryResponse)
def update_stock_level(
    inventory_id: int,
    stock_data: StockLevelUpdate,
    service: InventoryService = Depends(get_inventory_service),
):
    """재고 수량만 변경합니다."""
    return service.update_stock_level(inventory_id, stock_data.current_stock)


@router.delete("/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory(
    inventory_id: int,
    service: InventoryService = Depends(get_inventory_service),
):
    """재고 레코드를 삭제합니다."""
    service.delete_inventory(inventory_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
