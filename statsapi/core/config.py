from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from statsapi.core.schemas import DisplayMode

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


class Settings(BaseSettings):
    # Where the generated statistics documents are stored
    DATABASE_URL: str = "sqlite+aiosqlite:///./statistics.db"
    # Where the statistics queries are executed (falls back to DATABASE_URL)
    QUERY_DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    STATISTICS_REQUEST_DIR: Path = RESOURCES_DIR / "statistics-request-list"
    DEFAULT_DISPLAY_MODE: DisplayMode = DisplayMode.DEFAULT

    # This tells Pydantic to read from the .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def query_database_url(self) -> str:
        return self.QUERY_DATABASE_URL or self.DATABASE_URL


# Create a single instance of the settings to use everywhere
settings = Settings()
