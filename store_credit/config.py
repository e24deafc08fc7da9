"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "store-credit"
    log_level: str = "INFO"

    # API metadata
    api_title: str = "Store Credit Scoring"
    api_version: str = "0.1.0"


settings = Settings()
