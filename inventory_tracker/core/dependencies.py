from functools import lru_cache

from fastapi import HTTPException, status

from inventory_tracker.core.config import settings
from inventory_tracker.logger_config import logger
from inventory_tracker.storage.memory import MemoryWorksheet
from inventory_tracker.storage.sheets import open_worksheet


@lru_cache(maxsize=1)
def get_worksheet():
    """Open the configured worksheet once per process."""
    if settings.STORE_BACKEND == "sheets":
        logger.info(f"Opening Google Sheets worksheet '{settings.GOOGLE_SHEET_NAME}'")
        return open_worksheet(settings)

    logger.info("Using in-memory inventory worksheet")
    return MemoryWorksheet(title=settings.GOOGLE_SHEET_NAME)


def get_sheet():
    """Dependency to get the inventory worksheet."""
    try:
        return get_worksheet()
    except Exception as e:
        logger.error(f"Error opening inventory worksheet: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to open inventory worksheet",
        )
