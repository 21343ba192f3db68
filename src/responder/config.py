from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Responder settings loaded from environment variables with RESPONDER_ prefix."""

    # Server
    host: str = "0.0.0.0"
    port: int = 80
    # App
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="RESPONDER_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
