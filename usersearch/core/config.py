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
    APP_DESCRIPTION: str = "Filtered, sorted and paginated search over a fixed user dataset"

    # Server configuration
    SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8000"))
    WORKERS: int = int(os.getenv("WORKERS", "4"))

    # Shared secret checked against the AccessToken header
    ACCESS_TOKEN: str = os.getenv("ACCESS_TOKEN", "abc-def")

    # Dataset
    DATASET_PATH: str = os.getenv("DATASET_PATH", "dataset.xml")

    # Pagination
    MAX_LIMIT: int = int(os.getenv("MAX_LIMIT", "100"))

    # Client configuration
    SEARCH_API_URL: str = os.getenv("SEARCH_API_URL", "http://127.0.0.1:8000/")
    SEARCH_CLIENT_TIMEOUT: float = float(os.getenv("SEARCH_CLIENT_TIMEOUT", "1"))
    MAX_CLIENT_LIMIT: int = 25

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/usersearch.log")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"


# Create settings instance
settings = Settings()
