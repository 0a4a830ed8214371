"""
Pricing Service Configuration
Loads settings from environment variables
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment"""

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_ENV: str = os.getenv("API_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Configuration
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

    # Localization
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "tr")
    CURRENCY: str = os.getenv("CURRENCY", "TRY")

    # Price Comparison Bot
    PRICE_BOT_ENABLED: bool = _env_bool("PRICE_BOT_ENABLED")
    PRICE_BOT_INTERVAL_SECONDS: int = int(os.getenv("PRICE_BOT_INTERVAL_SECONDS", "3600"))
    PRICE_MATCH_UNDERCUT_PERCENT: float = float(os.getenv("PRICE_MATCH_UNDERCUT_PERCENT", "1.0"))
    PRICE_MATCH_MAX_DISCOUNT_PERCENT: float = float(os.getenv("PRICE_MATCH_MAX_DISCOUNT_PERCENT", "15.0"))

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
