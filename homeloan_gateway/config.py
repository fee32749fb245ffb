"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    product_api_base: str = "https://dummyjson.com"
    default_product_id: int = 1

    # Service
    service_name: str = "homeloan-gateway"
    log_level: str = "INFO"
    currency_code: str = "INR"

    # HTTP Client
    http_timeout_seconds: float = 5.0
    product_fetch_max_retries: int = 3
    product_fetch_backoff_base: float = 0.5  # Exponential backoff base in seconds


settings = Settings()
