"""
페이지네이션 스키마
"""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageRequest(BaseModel):
    """
    페이지 요청 (0부터 시작하는 페이지 번호)

    sort 항목 형식: "name", "name,asc", "price,desc"
    """

    page: int = Field(0, ge=0, description="페이지 번호 (0부터 시작)")
    size: int = Field(20, ge=1, description="페이지 크기")
    sort: list[str] = Field(default_factory=list, description="정렬 조건")

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """
    페이지 응답

    Example:
        {
            "items": [...],
            "page": 0,
            "size": 20,
            "total_elements": 45,
            "total_pages": 3
        }
    """

    items: list[T] = Field(default_factory=list, description="현재 페이지 항목")
    page: int = Field(..., description="페이지 번호")
    size: int = Field(..., description="페이지 크기")
    total_elements: int = Field(..., description="전체 항목 수")
    total_pages: int = Field(..., description="전체 페이지 수")

    @classmethod
    def of(cls, items: list, page_request: PageRequest, total_elements: int) -> "Page":
        """저장소가 계산한 전체 건수로 페이지 객체를 생성합니다."""
        return cls(
            items=items,
            page=page_request.page,
            size=page_request.size,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / page_request.size),
        )
