from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: Optional[str] = None
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    service_name: str = "orders-api"
    log_level: str = "INFO"
    cors_origins: str = "*"

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        if v.startswith("sqlite+aiosqlite://"):
            return v
        # sqlite://<path> names the file directly: sqlite://orders.db is
        # relative, sqlite:///var/orders.db is absolute
        if v.startswith("sqlite://"):
            return "sqlite+aiosqlite:///" + v[len("sqlite://"):]
        raise ValueError("Only SQLite through aiosqlite is supported")


settings = Settings()
