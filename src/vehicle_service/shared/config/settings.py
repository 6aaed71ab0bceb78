"""Application settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Backend API settings."""
    model_config = SettingsConfigDict(env_prefix="API_")

    base_url: str = "http://localhost:8083/api"
    timeout: float = 15.0


class ThemeSettings(BaseSettings):
    """Theme preference persistence settings."""
    model_config = SettingsConfigDict(env_prefix="THEME_")

    preference_file: Path = Path("./data/preferences.json")


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_enabled: bool = False
    file_path: str = "./logs/vehicle_service.log"
    console_enabled: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "Vehicle Service"
    app_version: str = "1.0.0"

    # Sub-settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
