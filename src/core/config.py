"""
Runtime configuration, read from environment variables (prefix TICTACTOE_).

The board size is a rule of the game and lives in src/tictactoe/cell.py, not here.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TICTACTOE_", extra="ignore")

    log_level: str = Field(
        default="INFO", description="Minimum level of log events that get rendered"
    )
    log_json: bool = Field(
        default=False, description="Render log events as JSON instead of console text"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
