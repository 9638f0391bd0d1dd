"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite:///./fitassess.db"

    # JWT verification (tokens are issued by the identity service)
    JWT_SECRET_KEY: str = "your-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"

    # Aliases for compatibility with auth_service
    @property
    def SECRET_KEY(self) -> str:
        return self.JWT_SECRET_KEY

    @property
    def ALGORITHM(self) -> str:
        return self.JWT_ALGORITHM

    # Frontend URL for CORS
    FRONTEND_URL: str = "http://localhost:8081"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Scoring
    SCORE_PRECISION: int = 3

    # Plan generation
    PLAN_WEEKS: int = 4
    DEFAULT_WEEKLY_VOLUME: int = 180  # minutes

    # Plan adaptation
    ADAPTATION_WINDOW_DAYS: int = 30
    ADAPTATION_MIN_RESULTS: int = 2
    ADAPTATION_MAX_RESULTS: int = 10
    PERFORMANCE_HISTORY_LIMIT: Optional[int] = 200  # None keeps every snapshot

    # Leaderboards
    LEADERBOARD_DEFAULT_LIMIT: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create a global settings instance for direct import
settings = get_settings()
