"""Application configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Shorter keys are treated as a copy/paste mistake rather than a credential
MIN_API_KEY_LENGTH = 10


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    GEMINI = "gemini"
    OPENAI = "openai"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"  # Empty disables history storage
    db_name: str = "childfood_db"

    # LLM Provider Selection
    llm_provider: LLMProvider = LLMProvider.GEMINI

    # Google Gemini Configuration
    google_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # OpenAI Configuration
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # LLM Settings
    llm_temperature: float = 0.4
    analysis_timeout_seconds: float = 30.0

    # OCR
    ocr_language: str = "eng"
    tesseract_cmd: str = ""  # Leave empty to use tesseract from PATH

    # Uploads
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MB

    # App
    debug: bool = False
    log_level: str = "INFO"
    app_name: str = "Child Food Analyzer API"
    api_version: str = "1.0.0"

    @property
    def llm_api_key(self) -> str:
        """API key for the selected provider."""
        if self.llm_provider == LLMProvider.OPENAI:
            return self.openai_api_key
        return self.google_api_key

    @property
    def llm_model(self) -> str:
        """Model name for the selected provider."""
        if self.llm_provider == LLMProvider.OPENAI:
            return self.openai_model
        return self.gemini_model

    @property
    def is_llm_configured(self) -> bool:
        """Check if the selected LLM provider has a usable API key."""
        key = self.llm_api_key.strip()
        return len(key) >= MIN_API_KEY_LENGTH


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
