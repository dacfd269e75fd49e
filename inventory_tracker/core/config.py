from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator
from typing import Literal
import os


class Settings(BaseSettings):
    APP_ENV: str = "local"
    LOCAL_URL: str = "http://127.0.0.1:8000"

    # Where inventory rows live: a Google Sheets tab or process memory
    STORE_BACKEND: Literal["sheets", "memory"] = "memory"

    # Google Sheets service account
    GOOGLE_SHEET_ID: str = ""
    GOOGLE_SHEET_NAME: str = "Inventory"
    GOOGLE_CLIENT_EMAIL: str = ""
    GOOGLE_PRIVATE_KEY: str = ""

    # Logging; LOG_FILE enables a rotating file next to the console output
    LOG_LEVEL: str = "DEBUG"
    LOG_FILE: str = ""

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    class Config:
        env_file = ".env" if os.getenv("APP_ENV", "local") == "local" else ".env.prod"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("GOOGLE_PRIVATE_KEY")
    @classmethod
    def unescape_private_key(cls, value: str) -> str:
        """Keys pasted into .env files usually carry literal \\n sequences."""
        return value.replace("\\n", "\n")

    @model_validator(mode='after')
    def check_sheet_credentials(self):
        """Require the service account values when the sheets backend is selected."""
        if self.STORE_BACKEND == "sheets":
            missing = [
                name for name in ("GOOGLE_SHEET_ID", "GOOGLE_CLIENT_EMAIL", "GOOGLE_PRIVATE_KEY")
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(f"Missing settings for the sheets backend: {', '.join(missing)}")
        return self


settings = Settings()
