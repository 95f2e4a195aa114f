"""Application configuration from environment"""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """API and persistence settings"""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    data_file: Path = Path("videos-data.json")
    default_creator_id: str = "user1"
    thumbnail_placeholder_url: str = "https://via.placeholder.com/300x200"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
