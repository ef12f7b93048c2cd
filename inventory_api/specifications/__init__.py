"""검색 조건(Specification) 모듈."""

from inventory_api.specifications.base import Specification
from inventory_api.specifications.criteria import (
    compile_inventory_criteria,
    compile_product_criteria,
)

__all__ = ["Specification", "compile_inventory_criteria", "compile_product_criteria"]
