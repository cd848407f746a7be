"""
Application Settings

Centralized configuration for the Samvidhan API.
All values are loaded from environment variables (a .env file in the
project root is read first).
"""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

load_dotenv(dotenv_path=ENV_FILE)


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get a boolean value from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on', 'enabled')


def get_float_env(key: str, default: float) -> float:
    """Get a float value from environment variable, falling back on bad input."""
    try:
        return float(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def get_list_env(key: str) -> List[str]:
    """Comma-separated environment variable as a list, blanks dropped."""
    return [item.strip() for item in os.getenv(key, "").split(",") if item.strip()]


class ArticleRangeMode:
    """How article numbers are compared against the rights sub-group bounds."""
    LEXICOGRAPHIC = "lexicographic"
    NUMERIC = "numeric"


class Settings:
    """
    Settings for the application.

    To add a new setting:
    1. Add it here as a class attribute
    2. Load it from an environment variable with a sensible default
    3. Read it through the module-level `settings` object
    """

    APP_NAME: str = "Samvidhan API"
    APP_VERSION: str = "1.0.0"

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./samvidhan.db")
    SEED_ON_STARTUP: bool = get_bool_env("SEED_ON_STARTUP", False)

    ALLOWED_ORIGINS: List[str] = get_list_env("ALLOWED_ORIGINS")

    # AI assistant (Gemini)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

    # Speech synthesis (OpenAI-compatible endpoint)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    TTS_API_URL: str = os.getenv("TTS_API_URL", "https://api.openai.com/v1/audio/speech")
    TTS_MODEL: str = os.getenv("TTS_MODEL", "tts-1")
    TTS_DEFAULT_VOICE: str = os.getenv("TTS_DEFAULT_VOICE", "alloy")

    PROVIDER_TIMEOUT_SECONDS: float = get_float_env("PROVIDER_TIMEOUT_SECONDS", 30.0)

    # Rate limiting (slowapi limit strings)
    RATE_LIMIT_ENABLED: bool = get_bool_env("RATE_LIMIT_ENABLED", True)
    AI_RATE_LIMIT: str = os.getenv("AI_RATE_LIMIT", "20/minute")
    TTS_RATE_LIMIT: str = os.getenv("TTS_RATE_LIMIT", "30/minute")

    ARTICLE_RANGE_MODE: str = os.getenv("ARTICLE_RANGE_MODE", ArticleRangeMode.LEXICOGRAPHIC).lower()

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def get_all(self) -> dict:
        """Non-secret settings, for diagnostics."""
        return {
            "environment": self.ENVIRONMENT,
            "database_backend": self.DATABASE_URL.split(":", 1)[0],
            "gemini_configured": bool(self.GEMINI_API_KEY),
            "tts_configured": bool(self.OPENAI_API_KEY),
            "rate_limit_enabled": self.RATE_LIMIT_ENABLED,
            "article_range_mode": self.ARTICLE_RANGE_MODE,
        }


settings = Settings()
