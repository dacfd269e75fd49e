# inventory_tracker/storage/__init__.py
from .memory import MemoryWorksheet
from .rows import HEADER_ROW, item_to_row, row_to_item
