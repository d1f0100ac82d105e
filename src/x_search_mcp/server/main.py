"""Process entrypoint: configure logging, load settings, serve tools over stdio."""

from __future__ import annotations

import logging

from x_search_mcp.config.observability import ObservabilitySettings
from x_search_mcp.config.settings import MissingCredentialError, Settings
from x_search_mcp.observability.logging import configure_logging
from x_search_mcp.server.app import build_client, build_server

_LOGGER = logging.getLogger("x_search_mcp.server")


def main() -> None:
    observability = ObservabilitySettings()
    configure_logging(level=observability.log_level, json_output=observability.log_format == "json")

    try:
        settings = Settings.load()
    except MissingCredentialError as exc:
        _LOGGER.error("startup aborted: %s", exc)
        raise SystemExit(1) from exc

    server = build_server(build_client(settings))
    _LOGGER.info(
        "x-search-mcp server running on stdio",
        extra={"data": {"model": settings.xai.xai_model, "base_url": settings.xai.xai_base_url}},
    )
    server.run(transport="stdio")


__all__ = ["main"]
