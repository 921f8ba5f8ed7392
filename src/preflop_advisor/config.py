from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings(BaseSettings):
    """Settings centralisées (env + défauts raisonnables)."""
    model_config = SettingsConfigDict(
        env_prefix="ADVISOR_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Credential du provider, lu tel quel depuis OPENAI_API_KEY
    OPENAI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "ADVISOR_OPENAI_API_KEY"),
    )

    # Modèle et échantillonnage
    MODEL_NAME: str = "gpt-4o-mini"
    TEMPERATURE: float = Field(0.2, ge=0.0, le=2.0)

    # Endpoint OpenAI-compatible
    API_BASE: str = "https://api.openai.com/v1"
    TIMEOUT_S: Optional[float] = None  # None = défaut du transport httpx

    LOG_LEVEL: str = "INFO"

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def _blank_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("API_BASE")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _level_upper(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError("LOG_LEVEL must be one of: " + "|".join(sorted(LOG_LEVELS)))
        return v

    @property
    def chat_url(self) -> str:
        return f"{self.API_BASE}/chat/completions"
