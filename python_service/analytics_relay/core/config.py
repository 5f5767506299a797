"""
Application configuration settings
"""
from typing import List
from pydantic_settings import BaseSettings


# Secrets the relay cannot serve a request without
REQUIRED_SECRETS = ("SHOPIFY_STORE_DOMAIN", "SHOPIFY_ACCESS_TOKEN", "GEMINI_API_KEY")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Shopify
    SHOPIFY_STORE_DOMAIN: str = ""
    SHOPIFY_ACCESS_TOKEN: str = ""
    SHOPIFY_API_VERSION: str = "2024-07"

    # Gemini
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    # Outbound request timeouts (seconds)
    REQUEST_TIMEOUT: float = 30.0
    AI_REQUEST_TIMEOUT: float = 60.0

    class Config:
        env_file = ".env"
        case_sensitive = True

    def missing_secrets(self) -> List[str]:
        """Names of the required secrets that are not configured"""
        return [name for name in REQUIRED_SECRETS if not getattr(self, name)]
