"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="STOCKROOM_",
        extra="ignore",
    )

    app_name: str = "Stockroom"
    secret_key: str = "change-me"

    # Database
    database_url: str | None = None
    db_driver: str = "mysql+aiomysql"
    db_host: str | None = None
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "stockroom"
    sqlite_path: str = "./stockroom.db"

    # Security
    access_token_expire_minutes: int = 60
    enforce_user_ownership: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the async database URL the engine should connect to."""

        if self.database_url:
            return self.database_url
        if self.db_host:
            url = URL.create(
                self.db_driver,
                username=self.db_user,
                password=self.db_password or None,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            )
            return url.render_as_string(hide_password=False)
        return f"sqlite+aiosqlite:///{self.sqlite_path}"

    @property
    def access_token_max_age(self) -> int:
        return self.access_token_expire_minutes * 60


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
