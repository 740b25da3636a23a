"""Application configuration.

Loads settings from environment variables (prefixed ``CATALOG_``) with
sensible defaults.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_dir: Path = _PROJECT_ROOT / "data"

    # Storefront
    featured_category_id: int = 4
    currency_symbol: str = "₪"

    # Logging
    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
