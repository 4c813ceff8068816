import logging
import os
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file, if present
_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(_ROOT / ".env")

DEFAULT_MODELS = {
    "anthropic": "claude-sonnet-4-20250514",
    "google": "gemini-2.5-flash-lite",
    "openai": "gpt-4o-mini",
}

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _first(*keys: str) -> Optional[str]:
    """
    Return the value of the first environment variable found in keys.
    """
    for key in keys:
        val = os.getenv(key)
        if val:
            return val
    return None


def _float_or_none(key: str) -> Optional[float]:
    val = os.getenv(key)
    if not val:
        return None
    return float(val)


def _split_csv(val: Optional[str]) -> List[str]:
    return [part.strip() for part in (val or "").split(",") if part.strip()]


class Settings(BaseModel):
    llm_provider: str = Field(default_factory=lambda: os.getenv("LLM_PROVIDER", "anthropic").lower())
    llm_model: Optional[str] = Field(default_factory=lambda: os.getenv("LLM_MODEL"))
    llm_max_tokens: int = Field(default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "2048")))
    llm_timeout: Optional[float] = Field(default_factory=lambda: _float_or_none("LLM_TIMEOUT"))
    anthropic_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY"))
    google_api_key: Optional[str] = Field(default_factory=lambda: _first("GOOGLE_API_KEY", "GEMINI_API_KEY"))
    openai_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    cors_origins: List[str] = Field(default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*")))
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3001")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    api_url: str = Field(default_factory=lambda: os.getenv("JOURNAL_GURU_API_URL", "http://localhost:3001"))

    @property
    def model(self) -> str:
        """Model id used for every generation call."""
        return self.llm_model or DEFAULT_MODELS.get(self.llm_provider, DEFAULT_MODELS["anthropic"])

    def api_key_for(self, provider: str) -> Optional[str]:
        return {
            "anthropic": self.anthropic_api_key,
            "google": self.google_api_key,
            "openai": self.openai_api_key,
        }.get(provider)


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    resolved = (level or settings.log_level or "INFO").upper()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    else:
        root.setLevel(resolved)


# Singleton instance for app-wide settings
settings = Settings()
