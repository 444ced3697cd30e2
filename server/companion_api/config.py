"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database location
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    database_name: str = "companion.db"

    @property
    def database_path(self) -> str:
        return os.path.join(self.data_path, self.database_name)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Optional text-generation backend
    generator_url: Optional[str] = None
    generator_token: Optional[str] = None
    generator_timeout_seconds: float = 5.0

    # Prior turns passed to the responder
    history_turns: int = 3

    class Config:
        env_prefix = "COMPANION_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
