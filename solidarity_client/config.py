# solidarity_client/config.py
from __future__ import annotations
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "0.1.0"
USER_AGENT = f"solidarity-tech/v1 (solidarity-client/{SDK_VERSION})"

DEFAULT_BASE_URL = "https://api.solidarity.tech/v1"
DEFAULT_TIMEOUT_S = 30.0

Profile = Literal["full", "core"]


class ClientConfig(BaseSettings):
    # --- Server ---
    base_url: str = DEFAULT_BASE_URL             # may contain {placeholders}
    server_variables: dict[str, str] = Field(default_factory=dict)

    # --- Requests ---
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    api_key: Optional[str] = None                # bearer token issued by Solidarity Tech

    # --- Catalog ---
    profile: Profile = "full"                    # full | core

    # --- Logging (optional) ---
    log_level: str = "INFO"

    # SOLIDARITY_TECH_API_KEY=..., SOLIDARITY_TECH_TIMEOUT_S=10, or a .env file
    model_config = SettingsConfigDict(
        env_prefix="SOLIDARITY_TECH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("profile", mode="before")
    @classmethod
    def _validate_profile(cls, v: str) -> str:
        v = str(v).lower()
        if v not in ("full", "core"):
            raise ValueError("PROFILE must be 'full' or 'core'")
        return v
