# inventory_api/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # Store connection (any SQLAlchemy URL; libSQL needs the access token)
    DATABASE_URL: str = "sqlite:///./database_inventory.db"
    DATABASE_TOKEN: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api/v1"

    # Extra CORS origin for the admin frontend
    FRONTEND_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    # Local time of the shop, applied to server-generated timestamps
    TIMEZONE_OFFSET_HOURS: int = -3

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
