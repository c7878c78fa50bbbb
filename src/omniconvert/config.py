"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from omniconvert.constants import LLM_TEMPERATURE

logger = logging.getLogger(__name__)

# litellm provider prefix → Settings attribute holding its key
PROVIDER_KEY_FIELDS: dict[str, str] = {
    "gemini": "gemini_api_key",
    "openai": "openai_api_key",
    "anthropic": "anthropic_api_key",
}


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # LLM Provider
    gemini_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Model chain (first = primary, rest = fallbacks tried in order)
    litellm_model_chain: Annotated[list[str], NoDecode] = [
        "gemini/gemini-2.5-flash",
    ]
    llm_timeout_seconds: int = 60
    llm_temperature: float = LLM_TEMPERATURE

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    # Catalog override (YAML or JSON); empty = built-in table
    catalog_file: Path | None = None

    @field_validator("litellm_model_chain", mode="before")
    @classmethod
    def _parse_chain(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("litellm_model_chain")
    @classmethod
    def _validate_chain(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "litellm_model_chain must contain at least one model"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for m in v:
            if m in seen:
                dupes.append(m)
            seen.add(m)
        if dupes:
            logger.warning(
                "Duplicate models in LITELLM_MODEL_CHAIN: %s",
                ", ".join(dupes),
            )
        return v

    def api_key_for(self, model: str) -> str:
        """Return the configured key for a ``provider/model`` string.

        Unknown providers return "" and are left to litellm's own
        environment lookup.
        """
        provider = model.split("/", 1)[0] if "/" in model else ""
        field_name = PROVIDER_KEY_FIELDS.get(provider)
        if field_name is None:
            return ""
        return str(getattr(self, field_name))

    @property
    def has_ai_credentials(self) -> bool:
        """True if any model in the chain has a usable key."""
        return any(
            self.api_key_for(m)
            or m.split("/", 1)[0] not in PROVIDER_KEY_FIELDS
            for m in self.litellm_model_chain
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
