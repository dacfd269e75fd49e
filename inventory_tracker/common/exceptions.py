class InventoryError(Exception):
    """Base class for inventory failures."""


class ItemNotFoundError(InventoryError):
    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__("Item not found")


class StoreError(InventoryError):
    """The backing spreadsheet was unreachable or rejected the call."""
