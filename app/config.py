"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    # Application
    app_name: str = Field(default="Easy AQI", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    # AirNow
    airnow_api_key: str = Field(..., alias="AIRNOW_API_KEY")
    airnow_base_url: str = Field(default="https://www.airnowapi.org", alias="AIRNOW_BASE_URL")
    airnow_search_distance: int = Field(
        default=10,
        alias="AIRNOW_SEARCH_DISTANCE",
        description="Search radius in miles around the ZIP code",
    )

    # Nominatim (OpenStreetMap geocoding)
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        alias="NOMINATIM_BASE_URL",
    )
    nominatim_user_agent: str = Field(default="easy-aqi", alias="NOMINATIM_USER_AGENT")

    # Outbound HTTP
    internal_base_url: str = Field(
        default="http://aqi.internal",
        alias="INTERNAL_BASE_URL",
        description="Base URL the page uses when calling its own API in-process",
    )
    http_timeout: float | None = Field(
        default=None,
        alias="HTTP_TIMEOUT",
        description="Timeout in seconds for outbound calls; httpx default when unset",
    )

    # CORS
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    @property
    def http_client_options(self) -> dict:
        """Keyword arguments for outbound ``httpx.AsyncClient`` instances."""
        if self.http_timeout is None:
            return {}
        return {"timeout": self.http_timeout}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance
settings = get_settings()
