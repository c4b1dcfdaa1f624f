"""
Application Configuration
Loads settings from .env file using Pydantic v2 with BaseSettings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ==================== Project Info ====================
    PROJECT_NAME: str = "Telal Property API"
    PROJECT_DESCRIPTION: str = "Property, customer, rental and receipt management"
    VERSION: str = "1.0.0"

    # ==================== Storage ====================
    DATABASE_PATH: str = "data/db.json"
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"

    # ==================== Security & Authentication ====================
    SECRET_KEY: str = "change-this-secret-key-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    # ==================== CORS & Frontend ====================
    FRONTEND_URL: str = "http://localhost:3000"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    # ==================== Server Configuration ====================
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ==================== Email Configuration ====================
    SMTP_SERVER: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    EMAIL_FROM: str = "Telal Al-Bidaya <no-reply@telalalbidaya.cloud>"
    EMAIL_REPLY_TO: str = "info@telalalbidaya.cloud"

    # ==================== Company Branding ====================
    COMPANY_NAME: str = "Telal Al-Bidaya Real Estate"
    COMPANY_ADDRESS: str = "P.O. Box: 500 | Postal Code: 316 | Sultanate of Oman"
    COMPANY_PHONE: str = "99171889 / 91997970"
    CURRENCY: str = "OMR"

    # ==================== Features ====================
    DEBUG: bool = False
    TESTING: bool = False
    LOG_LEVEL: str = "INFO"

    # ==================== Configuration Loading ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

    # ==================== Properties ====================
    @property
    def email_configured(self) -> bool:
        """Check if email is properly configured"""
        return bool(self.SMTP_SERVER and self.SMTP_USER and self.SMTP_PASSWORD)


# ==================== Settings Singleton ====================
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()


# ==================== Helper Functions ====================
def get_cors_origins() -> List[str]:
    """Get CORS allowed origins"""
    return settings.ALLOWED_ORIGINS


def is_development() -> bool:
    """Check if running in development"""
    return settings.DEBUG or "localhost" in settings.FRONTEND_URL
