"""List and dashboard views computed from the store's items."""
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional, Tuple

from inventory_tracker.schemas.item import InventoryItem
from inventory_tracker.utils.filters import apply_filters
from inventory_tracker.utils.stock import distinct_categories, low_stock_items, total_value

SortKey = Literal["name", "date", "lowStock"]

ITEMS_PER_PAGE = 10
LOW_STOCK_PER_PAGE = 3
CATEGORY_PREVIEW = 3

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class DashboardStats:
    total_items: int
    low_stock_count: int
    low_stock_items: List[InventoryItem] = field(default_factory=list)
    low_stock_pages: int = 0
    categories_count: int = 0
    categories_preview: str = ""
    total_value: float = 0.0


def _updated_at(item: InventoryItem) -> datetime:
    try:
        parsed = datetime.fromisoformat(item.last_updated.replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def filter_items(
    items: List[InventoryItem],
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> List[InventoryItem]:
    return apply_filters(items, search=search, category=category)


def sort_items(items: List[InventoryItem], sort_by: SortKey = "name") -> List[InventoryItem]:
    if sort_by == "name":
        return sorted(items, key=lambda item: item.name.lower())
    if sort_by == "date":
        return sorted(items, key=_updated_at, reverse=True)
    if sort_by == "lowStock":
        return sorted(items, key=lambda item: not item.low_stock)
    return list(items)


def paginate(items: List[InventoryItem], page: int = 1, per_page: int = ITEMS_PER_PAGE) -> Tuple[List[InventoryItem], int]:
    """Slice out a 1-based page. Returns the page and the total page count."""
    per_page = max(per_page, 1)
    total_pages = math.ceil(len(items) / per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * per_page
    return items[start:start + per_page], total_pages


def categories(items: List[InventoryItem]) -> List[str]:
    return distinct_categories(items)


def dashboard_stats(
    items: List[InventoryItem],
    low_stock_page: int = 1,
    per_page: int = LOW_STOCK_PER_PAGE,
) -> DashboardStats:
    low = low_stock_items(items)
    page_items, pages = paginate(low, low_stock_page, per_page)

    # Dashboard lists categories in the order they first appear
    seen = list(dict.fromkeys(item.category for item in items if item.category))
    preview = ", ".join(seen[:CATEGORY_PREVIEW]) + ("..." if len(seen) > CATEGORY_PREVIEW else "")

    return DashboardStats(
        total_items=len(items),
        low_stock_count=len(low),
        low_stock_items=page_items,
        low_stock_pages=pages,
        categories_count=len(seen),
        categories_preview=preview,
        total_value=total_value(items),
    )
