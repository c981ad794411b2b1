"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Deployment environment ("development" or "production").
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix of the versioned API.
        docs_enabled: Serve OpenAPI docs at /docs and /docs/json.
        cors_origins: Origins allowed to call the API from a browser.
        rate_limit_enabled: Toggle slowapi rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for compute-heavy endpoints.
        default_page_size: Page size used when `pageSize` is omitted.
        max_upload_bytes: Maximum accepted upload size.
        host: Bind address for the bundled server.
        port: Bind port for the bundled server.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Contract API"
    version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    docs_enabled: bool = True
    cors_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    default_page_size: int = 10
    max_upload_bytes: int = 10 * 1024 * 1024  # 10 MiB
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def is_production(self) -> bool:
        """True when running with ENVIRONMENT=production."""
        return self.environment.lower() == "production"


settings = Settings()
