"""
Configuration management for the usergraph service
"""

from pydantic_settings import BaseSettings

DEFAULT_CORS_ALLOW_METHODS = "POST, GET, OPTIONS, PUT, DELETE"
DEFAULT_CORS_ALLOW_HEADERS = (
    "Accept, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    graphql_path: str = "/graphql"

    # CORS headers applied to every response
    cors_allow_origin: str = "*"
    cors_allow_methods: str = DEFAULT_CORS_ALLOW_METHODS
    cors_allow_headers: str = DEFAULT_CORS_ALLOW_HEADERS

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "USERGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        api_port=settings.api_port,
    )


def cors_headers(config: Settings | None = None) -> dict[str, str]:
    """Return the cross-origin headers attached to every response."""
    config = config or settings
    return {
        "Access-Control-Allow-Origin": config.cors_allow_origin,
        "Access-Control-Allow-Methods": config.cors_allow_methods,
        "Access-Control-Allow-Headers": config.cors_allow_headers,
    }
