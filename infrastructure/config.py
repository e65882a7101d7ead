"""Application settings, read from environment variables"""
import os
from decimal import Decimal
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration"""

    # Price per night when neither the caller nor the hotel provides one
    default_nightly_rate: Decimal = Field(default=Decimal("150000"), ge=0)

    secret_key: str = "your-secret-key-keep-it-secret"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(default=30, ge=1)

    log_level: str = "INFO"

    admin_username: str = "admin"
    admin_password: str = "admin123"

    class Config:
        frozen = True

    @staticmethod
    def from_env(environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        mapping = {
            "default_nightly_rate": "DEFAULT_NIGHTLY_RATE",
            "secret_key": "SECRET_KEY",
            "jwt_algorithm": "JWT_ALGORITHM",
            "access_token_expire_minutes": "ACCESS_TOKEN_EXPIRE_MINUTES",
            "log_level": "LOG_LEVEL",
            "admin_username": "ADMIN_USERNAME",
            "admin_password": "ADMIN_PASSWORD",
        }
        values = {field: environ[var] for field, var in mapping.items() if var in environ}
        return Settings(**values)


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
