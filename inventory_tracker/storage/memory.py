import re
from typing import Optional

RANGE_START = re.compile(r"(?:.*!)?([A-Z]+)(\d+)")


def _format_cell(value) -> str:
    # Sheets hands values back as their formatted strings
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MemoryWorksheet:
    """A worksheet held in process memory.

    Implements the subset of the gspread ``Worksheet`` API the inventory
    service uses, with the same 1-based row numbering, so local runs and
    tests behave like the Google Sheets backend without the network.
    """

    def __init__(self, title: str = "Inventory", rows: Optional[list] = None):
        self.title = title
        self._rows = [[_format_cell(value) for value in row] for row in rows or []]

    def get_all_values(self) -> list[list[str]]:
        return [list(row) for row in self._rows]

    def row_values(self, row: int) -> list[str]:
        if row < 1 or row > len(self._rows):
            return []
        return list(self._rows[row - 1])

    def update(self, values=None, range_name=None, **kwargs):
        match = RANGE_START.match(range_name or "A1")
        if not match or match.group(1) != "A":
            raise ValueError(f"Unsupported range: {range_name}")
        start = int(match.group(2))

        for offset, row in enumerate(values or []):
            index = start - 1 + offset
            while len(self._rows) <= index:
                self._rows.append([])
            self._rows[index] = [_format_cell(value) for value in row]
        return {"updatedRange": range_name, "updatedRows": len(values or [])}

    def append_row(self, values, value_input_option="RAW", insert_data_option=None, **kwargs):
        # Appends land after the last non-empty row, like the Sheets append call
        while self._rows and not any(self._rows[-1]):
            self._rows.pop()
        self._rows.append([_format_cell(value) for value in values])
        return {"updates": {"updatedRange": f"A{len(self._rows)}", "updatedRows": 1}}

    def delete_rows(self, start_index: int, end_index: Optional[int] = None):
        end_index = end_index or start_index
        if start_index < 1 or end_index > len(self._rows) or start_index > end_index:
            raise ValueError(f"Rows {start_index}-{end_index} are out of range")
        del self._rows[start_index - 1:end_index]
        return {"deletedRows": end_index - start_index + 1}
