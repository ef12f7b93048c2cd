"""
상품 관리 API 엔드포인트

상품 생성, 조회, 수정, 상태 변경, 삭제 기능을 제공합니다.
오류 응답은 main.py의 예외 핸들러가 처리합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from inventory_api.api.deps import get_page_request, get_product_service
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.schemas.product import (
    ProductRequest,
    ProductResponse,
    ProductStatusUpdate,
)
from inventory_api.services import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def list_products(service: ProductService = Depends(get_product_service)):
    """
    모든 상품 목록을 조회합니다 (페이지네이션 없음).

    Example:
        Response (200):
        ```json
        [
            {
                "id": 1,
                "name": "Gaming Laptop",
                "category": "Electronics",
                "description": null,
                "price": 1899.0,
                "status": "AVAILABLE"
            }
        ]
        ```
    """
    return service.find_all_products()


@router.get("/paged", response_model=Page[ProductResponse])
def list_products_paged(
    page_request: PageRequest = Depends(get_page_request),
    service: ProductService = Depends(get_product_service),
):
    """
    상품 목록을 페이지 단위로 조회합니다.

    Query:
        page: 페이지 번호 (0부터 시작)
        size: 페이지 크기
        sort: 정렬 조건 (반복 가능, 예: sort=price,desc)
    """
    return service.find_all_products_paged(page_request)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        400: ID가 양수가 아닌 경우
        404: 상품을 찾을 수 없는 경우
    """
    return service.find_product_by_id(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    """
    새 상품을 생성합니다.

    Example:
        Request:
        ```json
        {
            "name": "Gaming Laptop",
            "category": "Electronics",
            "price": 1899.0
        }
        ```
    """
    return service.create_product(product_data)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    """
    상품 정보를 수정합니다.

    요청에 포함된 필드만 변경되며, name은 항상 필요합니다.
    """
    return service.update_product(product_id, product_data)


@router.patch("/{product_id}/status", response_model=ProductResponse)
def update_product_status(
    product_id: int,
    status_data: ProductStatusUpdate,
    service: ProductService = Depends(get_product_service),
):
    """상품 판매 상태를 변경합니다."""
    return service.update_product_status(product_id, status_data.status)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """상품을 삭제합니다."""
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
