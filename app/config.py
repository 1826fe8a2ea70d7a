import logging
from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # API Settings
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = Field(default=5000, validation_alias=AliasChoices("BACKEND_PORT", "PORT"))

    # CORS - čiarkou oddelený zoznam
    CORS_ORIGINS: str = (
        "http://localhost:5173,"
        "http://127.0.0.1:5173,"
        "https://pb-api-phle.onrender.com,"
        "https://projectbaymax.onrender.com"
    )

    # Mistral API
    MISTRAL_API_KEY: str = ""
    MISTRAL_MODEL: str = "mistral-large-latest"
    MISTRAL_TEMPERATURE: float = 0.7
    MISTRAL_MAX_TOKENS: int = 800

    # Claude API (záloha, ak chýba Mistral kľúč)
    ANTHROPIC_API_KEY: str = ""
    CLAUDE_MODEL: str = "claude-3-5-haiku-latest"

    # Medicínske databázy
    MEDLINEPLUS_URL: str = "https://connect.medlineplus.gov/service"
    PUBMED_EUTILS_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
    PUBMED_MAX_RESULTS: int = 3
    UPSTREAM_TIMEOUT: float = 15.0

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()


def log_settings_summary():
    """Zaloguje, ktoré API kľúče sú načítané (nie samotné kľúče)"""
    if settings.MISTRAL_API_KEY:
        logger.info("[CONFIG] Mistral API key loaded")
    else:
        logger.warning("[CONFIG] WARNING: Mistral API key not found in environment")

    if settings.ANTHROPIC_API_KEY:
        logger.info("[CONFIG] Claude API key loaded")

    logger.info(f"[CONFIG] CORS origins: {', '.join(settings.cors_origins)}")
