"""Configuration management using pydantic-settings."""

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the animal facts service."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMAL_FACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    # Service
    service_name: str = "animal-facts"
    service_version: str = "0.1.0"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # Upstream providers
    cat_api_url: AnyHttpUrl = "https://cat-fact.herokuapp.com/facts/random?animal_type=cat"
    dog_api_url: AnyHttpUrl = "http://dog-api.kinduff.com/api/facts"

    # Shared HTTP client
    http_timeout_seconds: float = 10.0
    user_agent: str = "animal-facts/0.1.0"

    # CORS
    cors_allow_origins: list[str] = ["http://localhost:8080"]


# Global settings instance
settings = Settings()
