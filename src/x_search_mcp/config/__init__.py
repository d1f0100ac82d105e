from x_search_mcp.config.observability import ObservabilitySettings
from x_search_mcp.config.settings import MissingCredentialError, Settings
from x_search_mcp.config.xai import XaiSettings

__all__ = ["MissingCredentialError", "ObservabilitySettings", "Settings", "XaiSettings"]
