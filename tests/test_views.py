from inventory_tracker.client.views import (
    categories,
    dashboard_stats,
    filter_items,
    paginate,
    sort_items,
)
from inventory_tracker.schemas.item import InventoryItem


def make_item(item_id, name, category="Dairy", quantity=10, min_stock=5, price=1, supplier="", last_updated="2025-11-20T14:00:00.000Z"):
    return InventoryItem(
        id=item_id, name=name, category=category, quantity=quantity, unit="kg",
        min_stock=min_stock, price=price, supplier=supplier, last_updated=last_updated,
    )


ITEMS = [
    make_item("1", "milk", quantity=2, min_stock=5, last_updated="2025-11-20T10:00:00.000Z"),
    make_item("2", "Flour", category="Baking", supplier="Prima Mills", last_updated="2025-11-21T10:00:00.000Z"),
    make_item("3", "Beef", category="Meat & Poultry", quantity=5, min_stock=5, supplier="Hill Dairy Farms", last_updated="not a date"),
    make_item("4", "Apples", category="Fruits", price=3),
]


def test_filter_by_search_and_category():
    assert [i.id for i in filter_items(ITEMS, search="mills")] == ["2"]
    assert [i.id for i in filter_items(ITEMS, search="DAIRY")] == ["1", "3"]
    assert [i.id for i in filter_items(ITEMS, category="Baking")] == ["2"]
    assert len(filter_items(ITEMS, category="all")) == 4


def test_sort_by_name_is_case_insensitive():
    assert [i.name for i in sort_items(ITEMS, "name")] == ["Apples", "Beef", "Flour", "milk"]


def test_sort_by_date_newest_first():
    assert [i.id for i in sort_items(ITEMS, "date")] == ["2", "4", "1", "3"]


def test_sort_low_stock_first_keeps_order():
    assert [i.id for i in sort_items(ITEMS, "lowStock")] == ["1", "3", "2", "4"]


def test_paginate_clamps_pages():
    items = [make_item(str(n), f"item {n}") for n in range(23)]

    page, total = paginate(items, 3)
    assert total == 3
    assert [i.id for i in page] == ["20", "21", "22"]

    page, _ = paginate(items, 99)
    assert page[0].id == "20"

    assert paginate([], 1) == ([], 0)


def test_categories_are_distinct_and_sorted():
    assert categories(ITEMS) == ["Baking", "Dairy", "Fruits", "Meat & Poultry"]


def test_dashboard_stats():
    stats = dashboard_stats(ITEMS)

    assert stats.total_items == 4
    assert stats.low_stock_count == 2
    assert [i.id for i in stats.low_stock_items] == ["1", "3"]
    assert stats.low_stock_pages == 1
    assert stats.categories_count == 4
    assert stats.categories_preview == "Dairy, Baking, Meat & Poultry..."
    assert stats.total_value == 2 * 1 + 10 * 1 + 5 * 1 + 10 * 3


def test_paginate_with_non_positive_page_size():
    page, total = paginate(ITEMS, 1, per_page=0)

    assert total == 4
    assert [i.id for i in page] == ["1"]
