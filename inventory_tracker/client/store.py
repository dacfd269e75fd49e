"""Client-side mirror of the inventory held by the API.

``InventoryStore`` keeps the item list, a loading flag and the last error.
Every mutation is followed by a full re-fetch, so ``items`` always reflects
what the server returned last rather than a locally patched copy.
"""
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from inventory_tracker.logger_config import logger
from inventory_tracker.schemas.item import InventoryItem, ItemCreate, ItemUpdate

API_PATH = "/api/inventory"


class InventoryClientError(Exception):
    """An API call failed or returned an unsuccessful envelope."""


class InventoryStore:
    def __init__(self, client: httpx.Client, api_path: str = API_PATH):
        self.client = client
        self.api_path = api_path.rstrip("/")
        self.items: list[InventoryItem] = []
        self.is_loading = False
        self.error: Optional[str] = None

    @classmethod
    def connect(cls, base_url: str) -> "InventoryStore":
        return cls(httpx.Client(base_url=base_url, timeout=None))

    def _request(self, method: str, path: str = "", default_error: str = "Request failed", **kwargs) -> dict[str, Any]:
        try:
            response = self.client.request(method, f"{self.api_path}{path}", **kwargs)
        except httpx.HTTPError as e:
            raise InventoryClientError(str(e) or default_error) from e

        try:
            result = response.json()
        except ValueError as e:
            raise InventoryClientError(f"{default_error} (HTTP {response.status_code})") from e

        if not isinstance(result, dict) or not result.get("success"):
            error = result.get("error") if isinstance(result, dict) else None
            raise InventoryClientError(error or default_error)
        return result

    def _start(self):
        self.is_loading = True
        self.error = None

    def _fail(self, e: InventoryClientError, action: str):
        self.error = str(e)
        self.is_loading = False
        logger.error(f"Error {action}: {str(e)}")

    def fetch_items(self) -> None:
        """Replace the local list with the server's. Failures land in ``error``."""
        self._start()
        try:
            result = self._request("GET", default_error="Failed to fetch items")
            try:
                items = [InventoryItem.model_validate(item) for item in result.get("data") or []]
            except ValidationError as e:
                raise InventoryClientError(f"Malformed item in response ({e.error_count()} errors)") from e
            self.items = items
            self.is_loading = False
        except InventoryClientError as e:
            self._fail(e, "fetching items")

    def add_item(self, item: Union[ItemCreate, Mapping[str, Any]]) -> None:
        if not isinstance(item, ItemCreate):
            item = ItemCreate.model_validate(item)

        self._start()
        try:
            self._request(
                "POST",
                json=item.model_dump(by_alias=True),
                default_error="Failed to add item",
            )
        except InventoryClientError as e:
            self._fail(e, "adding item")
            raise

        # Refresh the items list
        self.fetch_items()

    def update_item(self, item_id: str, updates: Union[ItemUpdate, Mapping[str, Any]]) -> None:
        if not isinstance(updates, ItemUpdate):
            updates = ItemUpdate.model_validate(updates)

        self._start()
        try:
            self._request(
                "PUT",
                f"/{item_id}",
                json=updates.model_dump(by_alias=True, exclude_unset=True),
                default_error="Failed to update item",
            )
        except InventoryClientError as e:
            self._fail(e, "updating item")
            raise

        self.fetch_items()

    def delete_item(self, item_id: str) -> None:
        self._start()
        try:
            self._request("DELETE", f"/{item_id}", default_error="Failed to delete item")
        except InventoryClientError as e:
            self._fail(e, "deleting item")
            raise

        self.fetch_items()

    def get_item(self, item_id: str) -> Optional[InventoryItem]:
        """Look an item up in local state only."""
        return next((item for item in self.items if item.id == item_id), None)
