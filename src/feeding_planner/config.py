"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    max_deviation_percent: float = 20.0
    min_combo_gap_kcal: float = 20.0
    max_meal_plan_options: int = 4
    complementary_suggestion_limit: int = 3
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_condition_list(raw: str | None) -> tuple[str, ...]:
    """Parse a comma-separated list of health condition tags."""
    if raw is None:
        return ()
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ()
    conditions: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().lower()
        if value and value not in conditions:
            conditions.append(value)
    return tuple(conditions)
