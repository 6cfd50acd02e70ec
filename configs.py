"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the app.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Database
    DATABASE_URL: str

    # LLM backends, one credential each
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Gateway behaviour
    LLM_PROVIDER_ORDER: list[str] = ["gemini", "openai"]
    LLM_TIMEOUT_SECONDS: float = 30.0

    # Summary extraction
    SUMMARY_FAILURE_POLICY: Literal["soft", "raise"] = "soft"
    SUMMARY_COMMIT_EMPTY: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # API parameters
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()  # type: ignore[call-arg]
