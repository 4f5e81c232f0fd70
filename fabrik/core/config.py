import os
import tempfile
from typing import Optional

class Settings:
    # Menu source
    MENU_URL: str = os.getenv("FABRIK_MENU_URL", "http://www.diefabrik.co.at/mittagsmenue/index.html")
    HOLIDAY_MARKER: str = os.getenv("FABRIK_HOLIDAY_MARKER", "urlaub")
    REST_DAY_MARKER: str = os.getenv("FABRIK_REST_DAY_MARKER", "Ruhetag")

    # Cache files live in a shared scratch directory
    CACHE_DIR: str = os.getenv("FABRIK_CACHE_DIR", tempfile.gettempdir())
    CACHE_PREFIX: str = os.getenv("FABRIK_CACHE_PREFIX", "fabrik-")

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Scraping
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: Optional[str] = os.getenv("LOG_FORMAT")

settings = Settings()
