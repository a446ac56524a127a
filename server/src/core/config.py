import os
import yaml
from pathlib import Path
from typing import Dict, Any
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_service_config() -> Dict[str, Any]:
    """Load service configuration from config.yml"""
    config_path = Path("/app/server/config.yml")
    if not config_path.exists():
        # Fallback to relative path for development
        config_path = Path("server/config.yml")

    if config_path.exists():
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    return {}


# Load service config from YAML
service_config = load_service_config()
catalog_config = service_config.get("catalog", {})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # Catalog (GW2 API) settings from config.yml with fallbacks
    GW2_API_BASE_URL: str = os.getenv(
        "GW2_API_BASE_URL", catalog_config.get("base_url", "https://api.guildwars2.com")
    )
    CATALOG_BATCH_SIZE: int = int(
        os.getenv("CATALOG_BATCH_SIZE", str(catalog_config.get("batch_size", 200)))
    )
    CATALOG_CACHE_TTL: float = float(
        os.getenv("CATALOG_CACHE_TTL", str(catalog_config.get("cache_ttl", 3600.0)))
    )
    CATALOG_REQUEST_TIMEOUT: float = float(
        os.getenv(
            "CATALOG_REQUEST_TIMEOUT", str(catalog_config.get("request_timeout", 10.0))
        )
    )

    # Wiki links shown next to resolved skins and dyes
    WIKI_BASE_URL: str = os.getenv(
        "WIKI_BASE_URL",
        service_config.get("wiki", {}).get("base_url", "https://wiki.guildwars2.com/wiki"),
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    @model_validator(mode="after")
    def validate_catalog_limits(self) -> "Settings":
        """Reject catalog settings that would disable batching or caching."""
        if self.CATALOG_BATCH_SIZE <= 0:
            raise ValueError("CATALOG_BATCH_SIZE must be a positive integer.")
        if self.CATALOG_CACHE_TTL <= 0:
            raise ValueError("CATALOG_CACHE_TTL must be positive (seconds).")
        if self.CATALOG_REQUEST_TIMEOUT <= 0:
            raise ValueError("CATALOG_REQUEST_TIMEOUT must be positive (seconds).")
        return self


settings = Settings()
