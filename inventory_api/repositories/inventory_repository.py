"""재고 저장소."""

from inventory_api.models.inventory import Inventory
from inventory_api.repositories.base import Repository


class InventoryRepository(Repository[Inventory]):
    """inventories 테이블 저장소"""

    model = Inventory
