from typing import Iterable, List, Optional

from inventory_tracker.schemas.item import InventoryItem

ALL_CATEGORIES = "all"


def matches_search(item: InventoryItem, search: str) -> bool:
    """Case-insensitive match against name, category or supplier."""
    term = search.lower()
    return (
        term in item.name.lower()
        or term in item.category.lower()
        or term in (item.supplier or "").lower()
    )


def apply_filters(
    items: Iterable[InventoryItem],
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> List[InventoryItem]:
    filtered = list(items)

    if search:
        filtered = [item for item in filtered if matches_search(item, search)]

    if category and category != ALL_CATEGORIES:
        filtered = [item for item in filtered if item.category == category]

    return filtered
