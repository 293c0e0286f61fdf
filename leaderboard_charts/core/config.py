"""
App configuration loaded from environment variables (.env)

Everything that changes between development/production lives here
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Leaderboard source - JSON payload prepared by the data-access collaborator
    leaderboard_path: str | None = None  # "data/leaderboard.json"

    # Event
    event_year: int = 2017  # Time axes start on the eve of day 1 of this year's event
    top_members: int = 3  # Members shown in the time-per-star chart
    days_in_event: int = 25  # Puzzle days (1..25)

    # App
    app_env: str = "development"  # or "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - where the chart page may be served from
    cors_origins: str = "http://localhost:3000"  # Comma separated URLs, "*" allows any

    class Config:
        env_file = ".env"  # Reads from the .env file
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra .env fields not declared on the model


@lru_cache()
def get_settings() -> Settings:
    """Return the configuration instance (cached so it is read once)"""
    return Settings()
