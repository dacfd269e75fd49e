from typing import Iterable, List

from inventory_tracker.schemas.item import InventoryItem, InventorySummary

# Suggested values for the item forms; any other string is accepted too
CATEGORIES = [
    "Beverages",
    "Dairy",
    "Baking",
    "Meat & Poultry",
    "Seafood",
    "Vegetables",
    "Fruits",
    "Grains & Pasta",
    "Spices & Condiments",
    "Frozen Foods",
    "Cleaning Supplies",
    "Disposables",
    "Other",
]

UNITS = [
    "kg",
    "g",
    "liters",
    "ml",
    "pieces",
    "boxes",
    "bottles",
    "cans",
    "packets",
    "bags",
    "dozen",
]


def low_stock_items(items: Iterable[InventoryItem]) -> List[InventoryItem]:
    return [item for item in items if item.low_stock]


def distinct_categories(items: Iterable[InventoryItem]) -> List[str]:
    return sorted({item.category for item in items if item.category})


def total_value(items: Iterable[InventoryItem]) -> float:
    return sum(item.quantity * item.price for item in items)


def summarize(items: List[InventoryItem]) -> InventorySummary:
    categories = distinct_categories(items)
    return InventorySummary(
        total_items=len(items),
        low_stock_count=len(low_stock_items(items)),
        categories_count=len(categories),
        categories=categories,
        total_value=total_value(items),
    )
