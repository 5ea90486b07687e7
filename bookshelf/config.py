"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str | None = Field(default=None)
    db_driver: str = Field(default="mysql+pymysql")
    db_host: str = Field(default="127.0.0.1")
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="bookshelf")
    db_port: int = Field(default=3306)
    db_pool_size: int = Field(default=10)
    db_pool_timeout: int = Field(default=30)  # seconds waiting for a free connection

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # API
    port: int = Field(default=3000)
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.is_production and self.database_url is None:
            if not self.db_password:
                raise ValueError("DB_PASSWORD must be set in production")
            if self.db_host in ("127.0.0.1", "localhost"):
                raise ValueError("DB_HOST should not use localhost in production")
        return self

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Database URL, either given whole or assembled from its parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
