import time
from contextlib import contextmanager
from typing import List, Optional, Tuple

from inventory_tracker.common.exceptions import ItemNotFoundError, StoreError
from inventory_tracker.logger_config import logger
from inventory_tracker.schemas.item import (
    InventoryItem,
    InventorySummary,
    ItemCreate,
    ItemUpdate,
)
from inventory_tracker.storage.rows import (
    HEADER_RANGE,
    HEADER_ROW,
    is_blank_row,
    is_header_row,
    item_to_row,
    now_iso,
    row_id,
    row_range,
    row_to_item,
)
from inventory_tracker.utils.filters import apply_filters
from inventory_tracker.utils.stock import summarize


@contextmanager
def sheet_call(action: str):
    """Turn any failure of the backing sheet into a StoreError."""
    try:
        yield
    except StoreError:
        raise
    except Exception as e:
        logger.error(f"Error {action}: {str(e)}")
        raise StoreError(str(e) or f"Failed {action}") from e


def _read_rows(sheet) -> List[Tuple[int, list]]:
    """Data rows paired with their 1-based sheet row number."""
    with sheet_call("reading inventory"):
        values = sheet.get_all_values()

    return [
        (row_number, row)
        for row_number, row in enumerate(values, start=1)
        if not is_blank_row(row) and not is_header_row(row)
    ]


def _find_row(sheet, item_id: str) -> Tuple[int, list]:
    for row_number, row in _read_rows(sheet):
        if row_id(row) == item_id:
            return row_number, row
    raise ItemNotFoundError(item_id)


def _generate_item_id(existing_ids) -> str:
    candidate = int(time.time() * 1000)
    # Ensure item_id is unique
    while str(candidate) in existing_ids:
        candidate += 1
    return str(candidate)


def initialize_sheet(sheet) -> bool:
    """Write the header row if the sheet is empty. Returns True when written."""
    with sheet_call("initializing sheet"):
        first_row = sheet.row_values(1)
        if not is_blank_row(first_row):
            return False
        sheet.update(range_name=HEADER_RANGE, values=[HEADER_ROW])

    logger.info("Inventory sheet initialized with header row")
    return True


def get_all_items(
    sheet,
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> List[InventoryItem]:
    """Get all items with optional filtering."""
    items = [row_to_item(row) for _, row in _read_rows(sheet)]
    return apply_filters(items, search=search, category=category)


def get_item_by_id(sheet, item_id: str) -> Optional[InventoryItem]:
    """Get item by ID."""
    for item in get_all_items(sheet):
        if item.id == item_id:
            return item
    return None


def create_item(sheet, item_data: ItemCreate) -> InventoryItem:
    """Create a new item with a timestamp-derived ID."""
    existing_ids = {row_id(row) for _, row in _read_rows(sheet)}

    item = InventoryItem(
        id=_generate_item_id(existing_ids),
        last_updated=now_iso(),
        **item_data.model_dump(),
    )

    with sheet_call("adding item"):
        sheet.append_row(
            item_to_row(item),
            value_input_option="RAW",
            insert_data_option="INSERT_ROWS",
        )
    return item


def update_item(sheet, item_id: str, item_data: ItemUpdate) -> InventoryItem:
    """Merge the given fields over the stored item and rewrite its row."""
    row_number, row = _find_row(sheet, item_id)

    changes = item_data.model_dump(exclude_unset=True, exclude_none=True)
    item = row_to_item(row).model_copy(
        update={**changes, "id": item_id, "last_updated": now_iso()}
    )

    with sheet_call("updating item"):
        sheet.update(range_name=row_range(row_number), values=[item_to_row(item)])
    return item


def delete_item(sheet, item_id: str) -> None:
    """Delete an item."""
    row_number, _ = _find_row(sheet, item_id)

    with sheet_call("deleting item"):
        sheet.delete_rows(row_number)


def get_inventory_summary(sheet) -> InventorySummary:
    return summarize(get_all_items(sheet))
