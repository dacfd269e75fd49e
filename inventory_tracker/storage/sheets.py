import gspread
from google.oauth2 import service_account
from gspread.exceptions import WorksheetNotFound

from inventory_tracker.core.config import Settings
from inventory_tracker.logger_config import logger
from inventory_tracker.storage.rows import COLUMN_COUNT

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_credentials(settings: Settings) -> service_account.Credentials:
    """Service account credentials from the configured client email and key."""
    info = {
        "type": "service_account",
        "client_email": settings.GOOGLE_CLIENT_EMAIL,
        "private_key": settings.GOOGLE_PRIVATE_KEY,
        "token_uri": TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def open_worksheet(settings: Settings) -> gspread.Worksheet:
    """Open the inventory tab, creating it when the spreadsheet lacks one."""
    client = gspread.authorize(build_credentials(settings))
    spreadsheet = client.open_by_key(settings.GOOGLE_SHEET_ID)

    try:
        return spreadsheet.worksheet(settings.GOOGLE_SHEET_NAME)
    except WorksheetNotFound:
        logger.info(f"Worksheet '{settings.GOOGLE_SHEET_NAME}' not found, creating it")
        return spreadsheet.add_worksheet(
            title=settings.GOOGLE_SHEET_NAME,
            rows=1000,
            cols=COLUMN_COUNT,
        )
