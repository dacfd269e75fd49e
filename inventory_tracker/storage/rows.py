"""Mapping between inventory records and positional spreadsheet rows.

Each item occupies one row of nine columns, A through I:
id, name, category, quantity, unit, min stock, price, supplier, last updated.
"""
import math
from datetime import datetime, timezone

from inventory_tracker.schemas.item import InventoryItem

HEADER_ROW = [
    "ID",
    "Name",
    "Category",
    "Quantity",
    "Unit",
    "Min Stock",
    "Price",
    "Supplier",
    "Last Updated",
]
COLUMN_COUNT = len(HEADER_ROW)
FIRST_COLUMN = "A"
LAST_COLUMN = "I"
HEADER_RANGE = f"{FIRST_COLUMN}1:{LAST_COLUMN}1"


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def row_range(row_number: int) -> str:
    return f"{FIRST_COLUMN}{row_number}:{LAST_COLUMN}{row_number}"


def parse_number(value) -> float:
    """Read a numeric cell; anything unreadable counts as zero."""
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _cell(row, index) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def row_to_item(row) -> InventoryItem:
    return InventoryItem(
        id=_cell(row, 0),
        name=_cell(row, 1),
        category=_cell(row, 2),
        quantity=parse_number(_cell(row, 3)),
        unit=_cell(row, 4),
        min_stock=parse_number(_cell(row, 5)),
        price=parse_number(_cell(row, 6)),
        supplier=_cell(row, 7),
        last_updated=_cell(row, 8) or now_iso(),
    )


def item_to_row(item: InventoryItem) -> list:
    return [
        item.id,
        item.name,
        item.category,
        item.quantity,
        item.unit,
        item.min_stock,
        item.price,
        item.supplier or "",
        item.last_updated,
    ]


def row_id(row) -> str:
    return _cell(row, 0).strip()


def is_blank_row(row) -> bool:
    return not any(str(cell).strip() for cell in row if cell is not None)


def is_header_row(row) -> bool:
    return row_id(row) == HEADER_ROW[0]
