"""조회 실행기."""

import logging
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from inventory_api.repositories.base import Repository
from inventory_api.schemas.pagination import Page, PageRequest
from inventory_api.specifications.base import Specification

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class QueryExecutor(Generic[ResponseT]):
    """
    저장소 조회를 실행하고 결과를 응답 스키마로 변환합니다.

    변환은 저장소가 반환한 순서를 그대로 유지하며, 부수 효과가 없습니다.
    저장소 오류는 변환하지 않고 그대로 전파합니다.
    """

    def __init__(self, repository: Repository, response_model: type[ResponseT]):
        self.repository = repository
        self.response_model = response_model

    def execute_simple_query(self, operation_description: str) -> list[ResponseT]:
        """필터 없이 전체 레코드를 조회합니다."""
        logger.debug("Executing simple query: %s", operation_description)
        records = self.repository.find_all()
        logger.debug("Found %d records for operation: %s", len(records), operation_description)
        return self._to_responses(records)

    def execute_specification_query(
        self, specification: Specification, operation_description: str
    ) -> list[ResponseT]:
        """Specification과 일치하는 레코드를 조회합니다."""
        logger.debug("Executing query: %s [%s]", operation_description, specification.description)
        records = self.repository.find_all(specification)
        logger.debug("Found %d records for operation: %s", len(records), operation_description)
        return self._to_responses(records)

    def execute_paged_query(
        self,
        page_request: PageRequest,
        operation_description: str,
        specification: Optional[Specification] = None,
    ) -> Page[ResponseT]:
        """
        한 페이지를 조회합니다.

        전체 건수와 전체 페이지 수는 저장소가 계산한 값을 사용합니다.
        """
        logger.debug(
            "Executing paged query: %s with pagination: %s",
            operation_description,
            page_request,
        )
        records, total = self.repository.find_page(page_request, specification)
        logger.debug("Found %d records for paged operation: %s", total, operation_description)
        return Page[self.response_model].of(self._to_responses(records), page_request, total)

    def _to_responses(self, records: list) -> list[ResponseT]:
        return [self.response_model.model_validate(record) for record in records]
