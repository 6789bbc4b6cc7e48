from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # bcrypt hash of the shared operator password (see scripts/hash_password.py).
    # Empty means every login is refused.
    access_password_hash: str = Field("", alias="ACCESS_PASSWORD_HASH")

    report_timezone: str = Field("UTC", alias="REPORT_TIMEZONE")
    report_id_prefix: str = Field("AAM", alias="REPORT_ID_PREFIX")
    delivery_delay_seconds: float = Field(2.0, alias="DELIVERY_DELAY_SECONDS")

    # Comma-separated, e.g. "https://admin.example.com,http://localhost:3000"
    cors_allow_origins: str = Field("*", alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
