"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "clearahead"
    log_level: str = "INFO"

    # Lookahead window policy (weeks); the engine itself projects any window
    default_window_weeks: int = 5
    min_window_weeks: int = 5
    max_window_weeks: int = 12

    # Kept aside from the lowest projected balance for the "safe number"
    safety_buffer: Decimal = Decimal("250")


settings = Settings()
