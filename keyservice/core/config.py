"""Application configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Application Settings
    app_name: str = Field(default="API Keys Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="production", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="", alias="LOG_FORMAT")

    # Key Store Settings
    seed_demo_keys: bool = Field(default=True, alias="SEED_DEMO_KEYS")

    # CORS Settings
    cors_allow_origin: str = Field(default="*", alias="CORS_ALLOW_ORIGIN")
    cors_allow_methods: str = Field(
        default="GET, POST, PUT, DELETE, OPTIONS",
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: str = Field(
        default="Content-Type, Authorization",
        alias="CORS_ALLOW_HEADERS",
    )

    # Server Settings
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8787, alias="PORT")

    @property
    def resolved_log_format(self) -> str:
        """JSON in production, text when DEBUG is on, unless LOG_FORMAT says otherwise."""
        if self.log_format:
            return self.log_format.lower()
        return "text" if self.debug else "json"

    @property
    def cors_headers(self) -> dict:
        """Header set attached to every JSON response and OPTIONS reply."""
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }


# Global settings instance
settings = Settings()
