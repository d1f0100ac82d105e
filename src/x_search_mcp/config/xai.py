"""xAI Responses API configuration."""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_XAI_BASE_URL = "https://api.x.ai/v1"
# grok-4 family models support the server-side x_search tool
DEFAULT_XAI_MODEL = "grok-4-1-fast"


class XaiSettings(BaseSettings):
    """Credential, endpoint and model used for every Grok search."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    xai_api_key: SecretStr = Field(default_factory=lambda: SecretStr(""), alias="XAI_API_KEY")
    xai_base_url: str = Field(default=DEFAULT_XAI_BASE_URL, alias="XAI_BASE_URL")
    xai_model: str = Field(default=DEFAULT_XAI_MODEL, alias="XAI_MODEL")
    xai_timeout_seconds: float | None = Field(default=None, alias="XAI_TIMEOUT_SECONDS", gt=0)

    @field_validator("xai_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("xai_timeout_seconds", mode="before")
    @classmethod
    def _blank_timeout_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def xai_api_key_value(self) -> str:
        return self.xai_api_key.get_secret_value()


__all__ = ["DEFAULT_XAI_BASE_URL", "DEFAULT_XAI_MODEL", "XaiSettings"]
