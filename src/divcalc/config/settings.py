"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


ECB_USD_EUR_URL = "https://data-api.ecb.europa.eu/service/data/EXR/D.USD.EUR.SP00.A"


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / "Documents" / "Dividend Calculator Data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DIVCALC_",
    )

    app_name: str = "Gross Dividend Calculator"

    # Data directory (database, rate file and exports live here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    # Static exchange-rate resource written by scripts/fetch_exchange_rates.py
    exchange_rates_path: Optional[Path] = None

    # Rate fetch job
    ecb_rates_url: str = ECB_USD_EUR_URL
    http_timeout_seconds: float = 30.0

    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "divcalc.db"
        return f"sqlite:///{db_path}"

    def get_exchange_rates_path(self) -> Path:
        """Get the path of the date -> rate JSON resource."""
        if self.exchange_rates_path:
            return self.exchange_rates_path
        return self.get_data_dir() / "exchange-rates.json"

    def get_export_dir(self) -> Path:
        """Get the export directory for CSV files."""
        export_dir = self.get_data_dir() / "exports"
        export_dir.mkdir(parents=True, exist_ok=True)
        return export_dir


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
