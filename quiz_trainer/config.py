"""Configuration settings using pydantic-settings."""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_PATH: str = Field(
        default="data/quizzes.db",
        description="Path to SQLite database file"
    )
    SEED_SAMPLE_QUIZZES: bool = Field(
        default=True,
        description="Insert sample quizzes when the database is empty"
    )

    # Console
    QUIZ_PROMPT: str = Field(
        default="quiz > ",
        description="Prompt shown while waiting for a command"
    )
    USE_COLOR: bool = Field(
        default=True,
        description="Colorize console output"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    LOG_FILE: str = Field(
        default="data/logs/quiz_trainer.log",
        description="Path to log file"
    )

    class Config:
        """Pydantic config."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()
