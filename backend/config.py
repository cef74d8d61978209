# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

BASE_DIR = Path(__file__).parent

# Resolve absolute path to the .env file for reliable loading
env_path = BASE_DIR.parent / ".env"

# Choices offered by the add/update forms. The store does not enforce them.
CONTAINERS = [1, 2, 3, 4, 5, 6, 7, 8]
SIDES = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N"]

LOW_STOCK_THRESHOLD = 2


class Settings(BaseSettings):
    PORT: int = 3000
    HOST: str = "0.0.0.0"

    # Plain file path (inventory.db) or a full sqlite:/// URL
    DATABASE_URL: str = "inventory.db"

    STATIC_DIR: str = str(BASE_DIR / "public")
    LOG_LEVEL: str = "INFO"
    APP_TITLE: str = "PJ Outdoors Inventory"

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")


settings = Settings()
