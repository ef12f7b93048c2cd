"""
SQLAlchemy 세션 기반 레코드 저장소

엔티티별 기본 조회/저장/삭제 연산과 Specification 조회, 페이지 조회를 제공합니다.
commit은 하지 않으며, 트랜잭션 경계는 서비스 계층이 정합니다.
"""

from typing import Generic, Optional, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session

from inventory_api.core.exceptions import InvalidArgumentException
from inventory_api.schemas.pagination import PageRequest
from inventory_api.specifications.base import Specification

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """단일 모델에 대한 저장소"""

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[ModelT]:
        """
        ID로 엔티티를 조회합니다.

        Returns:
            엔티티 또는 None
        """
        return self.db.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        query = self.db.query(self.model).filter(self.model.id == entity_id)
        return self.db.query(query.exists()).scalar()

    def save(self, entity: ModelT) -> ModelT:
        """
        엔티티를 세션에 추가하고 flush하여 ID를 할당받습니다.
        """
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        self.db.query(self.model).filter(self.model.id == entity_id).delete(
            synchronize_session="fetch"
        )

    def find_all(self, specification: Optional[Specification] = None) -> list[ModelT]:
        """
        Specification과 일치하는 엔티티를 ID 순서로 조회합니다.

        Args:
            specification: 조회 조건 (None이면 전체 조회)
        """
        return self._query(specification).order_by(self.model.id).all()

    def find_page(
        self,
        page_request: PageRequest,
        specification: Optional[Specification] = None,
    ) -> tuple[list[ModelT], int]:
        """
        한 페이지 분량의 엔티티와 전체 건수를 조회합니다.

        Args:
            page_request: 페이지 번호, 크기, 정렬 조건
            specification: 조회 조건 (None이면 전체 조회)

        Returns:
            (현재 페이지 엔티티 리스트, 전체 건수)

        Raises:
            InvalidArgumentException: 정렬 속성이 모델 컬럼이 아닌 경우
        """
        query = self._query(specification)
        total = query.count()

        ordering = self._order_by(page_request.sort)
        items = (
            query.order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        return items, total

    def _query(self, specification: Optional[Specification]) -> Query:
        query = self.db.query(self.model)
        if specification is not None:
            query = query.filter(specification(self.model))
        return query

    def _order_by(self, sort: list[str]) -> list:
        columns = inspect(self.model).columns
        ordering = []
        for order in sort:
            prop, _, direction = order.partition(",")
            prop = prop.strip()
            direction = direction.strip().lower() or "asc"
            if prop not in columns or direction not in ("asc", "desc"):
                raise InvalidArgumentException(f"Invalid sort order: {order}")
            column = getattr(self.model, prop)
            ordering.append(column.desc() if direction == "desc" else column.asc())
        # 동일 정렬 값 사이의 순서를 고정
        ordering.append(self.model.id.asc())
        return ordering
