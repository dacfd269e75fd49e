import pytest
from fastapi.testclient import TestClient

from inventory_tracker.core.dependencies import get_sheet
from inventory_tracker.main import app
from inventory_tracker.schemas.item import ItemCreate
from inventory_tracker.storage.memory import MemoryWorksheet


class BrokenWorksheet:
    """Worksheet whose every call fails like an unreachable backend."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise ConnectionError("Spreadsheet backend unreachable")
        return fail


@pytest.fixture
def sheet():
    return MemoryWorksheet()


@pytest.fixture
def client(sheet):
    app.dependency_overrides[get_sheet] = lambda: sheet
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_sheet] = lambda: BrokenWorksheet()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def milk_payload():
    return {
        "name": "Milk",
        "category": "Dairy",
        "quantity": 40,
        "unit": "liters",
        "minStock": 20,
        "price": 1.5,
        "supplier": "Highland",
    }


@pytest.fixture
def milk(milk_payload):
    return ItemCreate.model_validate(milk_payload)
