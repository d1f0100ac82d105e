"""Server configuration resolved once from the environment at startup."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from x_search_mcp.config.observability import ObservabilitySettings
from x_search_mcp.config.xai import XaiSettings


class MissingCredentialError(RuntimeError):
    """Raised when the xAI API key is not configured."""


class Settings(BaseSettings):
    """Aggregated settings handed to the client and server wiring.

    Request-handling code receives this object (or pieces of it) explicitly and never
    reads the environment itself.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    xai: XaiSettings = Field(default_factory=XaiSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @property
    def xai_api_key_value(self) -> str:
        return self.xai.xai_api_key_value

    # --- Loader ---
    @classmethod
    def load(cls) -> Settings:
        instance = cls()
        if not instance.xai_api_key_value.strip():
            raise MissingCredentialError("XAI_API_KEY environment variable is required")
        logger = logging.getLogger("x_search_mcp.settings")
        logger.info("server settings loaded: %r", instance)
        return instance


__all__ = ["MissingCredentialError", "Settings"]
