"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_planner.domain.profile import DEFAULT_LOCALE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "medium"
    openai_store: bool = False
    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    profile_store_path: Path = Path(".diet_planner/profile.json")
    default_locale: str = DEFAULT_LOCALE
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_locale(raw: str | None, default: str = DEFAULT_LOCALE) -> str:
    """Normalize a locale tag such as ``tr_tr`` to ``tr-TR``."""
    if raw is None:
        return default
    cleaned = raw.strip().replace("_", "-")
    if not cleaned:
        return default
    language, _, region = cleaned.partition("-")
    if not language.isalpha():
        return default
    if region:
        return f"{language.lower()}-{region.upper()}"
    return language.lower()
