"""Grok search core: request building, HTTP exchange and response normalization."""

from x_search_mcp.tools.grok import GrokClient
from x_search_mcp.tools.normalize import normalize_response
from x_search_mcp.tools.rendering import render_error, render_result
from x_search_mcp.tools.request_builder import build_search_request, check_search_options
from x_search_mcp.tools.search_models import Citation, NormalizedResult, SearchOptions, SearchRequestBody

__all__ = [
    "Citation",
    "GrokClient",
    "NormalizedResult",
    "SearchOptions",
    "SearchRequestBody",
    "build_search_request",
    "check_search_options",
    "normalize_response",
    "render_error",
    "render_result",
]
