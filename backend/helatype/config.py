"""
config.py - Application Configuration

This module defines all configuration settings for the application.
Settings are loaded from environment variables or .env file.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

# Calculate .env path at module level (project root / .env)
_ENV_FILE_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    """
    Application settings.

    All settings can be overridden by environment variables.
    For example, set GROQ_API_KEY in .env file.
    """

    # Application Info
    APP_NAME: str = "HelaType Sinhala Transliteration"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/v1"

    # Writing assistant
    # LLM_PROVIDER options: "groq", "openrouter", "gemini"
    LLM_PROVIDER: str = "groq"
    GROQ_API_KEY: str | None = None
    OPENROUTER_API_KEY: str | None = None
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    LLM_TIMEOUT: int = 30
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 1000

    # History storage
    # HISTORY_BACKEND options: "file", "memory"
    HISTORY_BACKEND: str = "file"
    HISTORY_FILE_PATH: str = "data/history.json"

    # Export and saving
    EXPORT_FILENAME: str = "HelaType_Master_Export.txt"
    EXPORT_DIR: str = "data/exports"
    DEFAULT_SAVE_LABEL: str = "Untitled"

    class Config:
        """Configuration for settings loading."""
        env_file = str(_ENV_FILE_PATH)
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings instance
    """
    print("[config] Loading settings")
    settings = Settings()
    print("[config] App name:", settings.APP_NAME)
    print("[config] Version:", settings.VERSION)
    print("[config] LLM provider:", settings.LLM_PROVIDER)
    print("[config] History backend:", settings.HISTORY_BACKEND)
    return settings
