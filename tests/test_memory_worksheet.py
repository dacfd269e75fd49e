import pytest

from inventory_tracker.storage.memory import MemoryWorksheet


def test_values_come_back_as_strings():
    sheet = MemoryWorksheet()
    sheet.append_row(["1", "Milk", "Dairy", 40.0, "liters", 20, 1.5, None, "t"])

    assert sheet.get_all_values() == [["1", "Milk", "Dairy", "40", "liters", "20", "1.5", "", "t"]]


def test_update_writes_rows_in_place():
    sheet = MemoryWorksheet(rows=[["a"], ["b"], ["c"]])

    sheet.update(range_name="A2:I2", values=[["B", "2"]])

    assert sheet.row_values(2) == ["B", "2"]
    assert sheet.row_values(3) == ["c"]


def test_update_extends_an_empty_sheet():
    sheet = MemoryWorksheet()

    sheet.update(range_name="Inventory!A1:I1", values=[["ID", "Name"]])

    assert sheet.row_values(1) == ["ID", "Name"]
    assert sheet.row_values(2) == []


def test_append_skips_trailing_blank_rows():
    sheet = MemoryWorksheet(rows=[["a"], [], []])

    sheet.append_row(["b"])

    assert sheet.get_all_values() == [["a"], ["b"]]


def test_delete_rows():
    sheet = MemoryWorksheet(rows=[["a"], ["b"], ["c"]])

    sheet.delete_rows(2)

    assert sheet.get_all_values() == [["a"], ["c"]]
    with pytest.raises(ValueError):
        sheet.delete_rows(5)
