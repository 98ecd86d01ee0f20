# config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Window
    # ==============================
    APP_TITLE: str = "Stock Manager - Inventory Control"
    WINDOW_GEOMETRY: str = "1000x650"
    THEME: str = ""  # ttk theme name, empty keeps the platform default

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Store
    # ==============================
    SEED_EXAMPLE_DATA: bool = True

    # ==============================
    # Reports
    # ==============================
    RECENT_MOVEMENTS_LIMIT: int = 50
    PRODUCT_DETAIL_LIMIT: int = 10


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
