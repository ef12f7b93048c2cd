"""
조합 가능한 검색 조건(Specification)

Specification은 모델 클래스를 받아 SQL boolean 식을 만드는 클로저를 감쌉니다.
실제 평가는 저장소(데이터베이스)의 쿼리 엔진이 수행합니다.

사용 예:
    spec = has_name("laptop") & has_price_between(100, None)
    db.query(Product).filter(spec(Product)).all()
"""

from functools import reduce
from typing import Callable

from sqlalchemy import and_, not_, or_, true
from sqlalchemy.sql.elements import ColumnElement

ClauseBuilder = Callable[[type], ColumnElement[bool]]


class Specification:
    """모델 하나에 대한 조합 가능한 조건"""

    def __init__(self, build: ClauseBuilder, description: str = "specification"):
        self._build = build
        self.description = description

    def __call__(self, model: type) -> ColumnElement[bool]:
        return self._build(model)

    def __and__(self, other: "Specification") -> "Specification":
        return Specification(
            lambda model: and_(self(model), other(model)),
            f"({self.description} AND {other.description})",
        )

    def __or__(self, other: "Specification") -> "Specification":
        return Specification(
            lambda model: or_(self(model), other(model)),
            f"({self.description} OR {other.description})",
        )

    def __invert__(self) -> "Specification":
        return Specification(lambda model: not_(self(model)), f"NOT {self.description}")

    def __repr__(self) -> str:
        return f"<Specification {self.description}>"

    @classmethod
    def universal(cls) -> "Specification":
        """모든 레코드와 일치하는 조건 (필터 없음)"""
        return cls(lambda model: true(), "all")

    @classmethod
    def all_of(cls, *specifications: "Specification") -> "Specification":
        """universal 조건에서 시작하여 주어진 조건들을 AND로 결합합니다."""
        return reduce(lambda left, right: left & right, specifications, cls.universal())


def has_text(value: str | None) -> bool:
    """공백이 아닌 문자가 하나 이상 있는지 확인합니다."""
    return value is not None and value.strip() != ""
