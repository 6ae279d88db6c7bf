"""
Application configuration settings.
Manages all environment variables and constants.
"""

import os


class Settings:
    """Application settings configuration."""

    # Application metadata
    APP_NAME: str = "User Search API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Search, order and paginate people records"

    # Server configuration
    API_V1_STR: str = "/api/v1"
    SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8000"))
    WORKERS: int = int(os.getenv("WORKERS", "4"))

    # Dataset configuration
    DATASET_PATH: str = os.getenv("DATASET_PATH", "dataset.xml")

    # Access control
    ACCESS_TOKEN_HEADER: str = "AccessToken"
    BAD_ACCESS_TOKEN: str = os.getenv("BAD_ACCESS_TOKEN", "bad")

    # Pagination
    HAS_MORE_HEADER: str = "X-Has-More"
    MAX_LIMIT: int = 25

    # Client configuration
    SEARCH_URL: str = os.getenv("SEARCH_URL", "http://localhost:8000/api/v1/search")
    CLIENT_TIMEOUT: float = float(os.getenv("CLIENT_TIMEOUT", "1"))

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/app.log")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"


# Create settings instance
settings = Settings()
