"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provider settings loaded from environment variables (``XRAY_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="XRAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    log_level: str = "INFO"
    json_logs: bool = False

    # Xray instance
    url: str | None = None
    access_token: str | None = None

    # HTTP client
    request_timeout: float = 30.0
    retry_count: int = 2  # GET requests only
    user_agent: str = "xray-provider"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.url is not None:
            self.url = self.url.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
