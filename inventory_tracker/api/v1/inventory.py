from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional
from inventory_tracker.core.dependencies import get_sheet
from inventory_tracker.common.exceptions import ItemNotFoundError
from inventory_tracker.services.inventory_service import (
    initialize_sheet,
    get_all_items,
    get_item_by_id,
    get_inventory_summary,
    create_item,
    update_item,
    delete_item
)
from inventory_tracker.schemas.item import (
    ItemCreate,
    ItemUpdate,
    ItemResponse,
    ItemListResponse,
    ItemDeleteResponse,
    SummaryResponse
)
from inventory_tracker.logger_config import logger

router = APIRouter()


@router.get("", response_model=ItemListResponse)
def get_items(
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    sheet=Depends(get_sheet)
):
    """
    Get all inventory items.
    Adds the header row first when the sheet is empty.
    """
    try:
        initialize_sheet(sheet)
        items = get_all_items(sheet, search=search, category=category)
        return ItemListResponse(data=items)
    except Exception as e:
        logger.error(f"Error fetching inventory: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to fetch inventory"
        )


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item_route(
    item_data: ItemCreate,
    sheet=Depends(get_sheet)
):
    """
    Add a new inventory item.
    The ID and last-updated timestamp are assigned here.
    """
    try:
        initialize_sheet(sheet)
        item = create_item(sheet, item_data)

        logger.info(f"Item {item.id} ({item.name}) created")

        return ItemResponse(data=item)
    except Exception as e:
        logger.error(f"Error adding inventory item: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to add item"
        )


@router.get("/summary", response_model=SummaryResponse)
def get_summary(sheet=Depends(get_sheet)):
    """
    Totals for the dashboard: item count, low stock count,
    categories and stock value.
    """
    try:
        return SummaryResponse(data=get_inventory_summary(sheet))
    except Exception as e:
        logger.error(f"Error building inventory summary: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to build summary"
        )


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(
    item_id: str,
    sheet=Depends(get_sheet)
):
    """
    Get item by ID.
    """
    try:
        item = get_item_by_id(sheet, item_id)
    except Exception as e:
        logger.error(f"Error fetching item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to fetch item"
        )

    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )

    return ItemResponse(data=item)


@router.put("/{item_id}", response_model=ItemResponse)
def update_item_route(
    item_id: str,
    item_data: ItemUpdate,
    sheet=Depends(get_sheet)
):
    """
    Update an inventory item.
    Only the fields present in the body change; the ID is kept.
    """
    try:
        item = update_item(sheet, item_id, item_data)

        logger.info(f"Item {item_id} updated")

        return ItemResponse(data=item)
    except ItemNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    except Exception as e:
        logger.error(f"Error updating item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to update item"
        )


@router.delete("/{item_id}", response_model=ItemDeleteResponse)
def delete_item_route(
    item_id: str,
    sheet=Depends(get_sheet)
):
    """
    Delete an inventory item.
    """
    try:
        delete_item(sheet, item_id)

        logger.info(f"Item {item_id} deleted")

        return ItemDeleteResponse(
            message="Item deleted successfully"
        )
    except ItemNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    except Exception as e:
        logger.error(f"Error deleting item {item_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to delete item"
        )
