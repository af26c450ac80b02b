"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (production: postgresql+psycopg2://...)
    database_url: str = "sqlite:///./exitum.db"

    # Text generation API
    generation_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    generation_api_key: str = ""
    generation_model: str = "gemini-2.5-flash"
    generation_temperature: float = 0.7

    # Service
    service_name: str = "exitum-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 15.0
    generation_max_retries: int = 3
    generation_backoff_base: float = 1.0  # Exponential backoff base in seconds

    # Back-office
    lead_list_limit: int = 100


settings = Settings()
