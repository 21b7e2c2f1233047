from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from pydantic import Field
from typing import Optional
from datetime import date

class Settings(BaseSettings):
    """Defaults for command line options, loaded from environment variables (.env)."""
    build: str = Field(default="Fixed", alias="UPDATEVERSION_BUILD")
    revision: str = Field(default="Automatic", alias="UPDATEVERSION_REVISION")
    version_type: str = Field(default="Assembly", alias="UPDATEVERSION_VERSION_TYPE")
    # Only used by the MonthDay build type
    start_date: Optional[date] = Field(default=None, alias="UPDATEVERSION_START_DATE")
    encoding: str = Field(default="utf-8", alias="UPDATEVERSION_ENCODING")
    log_level: str = Field(default="WARNING", alias="UPDATEVERSION_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

def get_settings() -> "Settings":
    return Settings()  # type: ignore[call-arg]
