"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Simulation settings
    MAX_DAYS: int = 7
    GAME_SPEED: str = "normal"
    INVENTORY_SLOTS: int = 10
    SEED_ITEMS_PATH: str = "src/data/seed_items.json"


settings = Settings()
