"""
Configuration management for the groupware batch jobs
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional, List, Tuple


class Settings(BaseSettings):
    """Batch settings loaded from environment variables"""

    DATABASE_URL: str = Field(
        default="sqlite:///./groupware_batch.db",
        description="SQLAlchemy database URL (PostgreSQL in staging/prod)"
    )

    APP_ENV: str = Field(default="local", description="Application environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level: DEBUG, INFO, WARNING, ERROR")

    # "Today" for grant gating and ledger months is computed in this zone
    BATCH_TIMEZONE: str = Field(default="Asia/Tokyo", description="Timezone used to determine the batch business date")

    # Static holidays merged with the public_holidays table (MM-DD, comma-separated)
    DEFAULT_HOLIDAYS: str = Field(
        default="01-01,01-02,01-03,12-29,12-30,12-31",
        description="Comma-separated MM-DD days that are always holidays"
    )

    VERSION: Optional[str] = Field(default=None, description="Application version (git SHA or semver)")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate APP_ENV"""
        allowed = ["local", "staging", "prod"]
        if v not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL"""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    def validate_production(self) -> None:
        """
        Validate settings for production environment

        Raises:
            ValueError: If production settings are invalid
        """
        if self.APP_ENV == "prod" and self.DATABASE_URL.startswith("sqlite"):
            raise ValueError("DATABASE_URL must not point at SQLite in production environment")

    def get_default_holidays(self) -> List[Tuple[int, int]]:
        """
        Parse DEFAULT_HOLIDAYS into (month, day) pairs

        Returns:
            List of (month, day) tuples

        Raises:
            ValueError: If an entry is not a valid MM-DD day
        """
        days = []
        for raw in self.DEFAULT_HOLIDAYS.split(","):
            item = raw.strip()
            if not item:
                continue
            parts = item.split("-")
            if len(parts) != 2 or not all(p.isdigit() for p in parts):
                raise ValueError(f"Invalid holiday entry: {item!r}. Use MM-DD")
            month, day = int(parts[0]), int(parts[1])
            # Leap year so that 02-29 is accepted
            if not 1 <= month <= 12 or not 1 <= day <= _days_in_month_leap(month):
                raise ValueError(f"Invalid holiday entry: {item!r}")
            days.append((month, day))
        return days


def _days_in_month_leap(month: int) -> int:
    if month == 2:
        return 29
    if month in (4, 6, 9, 11):
        return 30
    return 31


# Create settings instance
settings = Settings()

# Validate production settings if in prod
if settings.APP_ENV == "prod":
    settings.validate_production()
