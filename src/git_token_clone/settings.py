# File: src/git_token_clone/settings.py
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.options import DEFAULT_USERNAME


class Settings(BaseSettings):
    """Environment read once per run and handed to the resolver."""

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=True, populate_by_name=True)

    # default token source when neither --token nor --token-file is given
    github_token: Optional[str] = Field(
        default=None, repr=False, validation_alias=AliasChoices("GITHUB_TOKEN")
    )
    default_username: str = Field(
        default=DEFAULT_USERNAME, validation_alias=AliasChoices("GIT_TOKEN_CLONE_USERNAME")
    )

    # logging
    log_level: str = Field(default="WARNING", validation_alias=AliasChoices("LOG_LEVEL"))
    log_json: bool = Field(default=False, validation_alias=AliasChoices("LOG_JSON"))

    @property
    def env_token(self) -> Optional[str]:
        return self.github_token or None
