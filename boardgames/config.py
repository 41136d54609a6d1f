"""Runtime settings, read from ``BOARDGAMES_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from boardgames.application.validation import GameValidationPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOARDGAMES_",
        env_file=".env",
        extra="ignore",
    )

    storage_backend: Literal["memory", "json"] = "memory"
    data_file: str = "data/games.json"
    log_level: str = "INFO"

    admin_role: str = "admin"
    user_header: str = "X-User"
    roles_header: str = "X-Roles"

    title_max_length: int = Field(200, ge=1)
    publisher_max_length: int = Field(200, ge=1)
    description_max_length: int = Field(2000, ge=1)
    max_players_limit: int = Field(100, ge=1)

    host: str = "0.0.0.0"
    port: int = 8000

    def validation_policy(self) -> GameValidationPolicy:
        return GameValidationPolicy(
            title_max_length=self.title_max_length,
            publisher_max_length=self.publisher_max_length,
            description_max_length=self.description_max_length,
            max_players_limit=self.max_players_limit,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
