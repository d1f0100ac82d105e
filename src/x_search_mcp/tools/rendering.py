"""Human-readable rendering of normalized search results."""

from __future__ import annotations

from x_search_mcp.errors import GrokSearchError, SearchErrorKind, SearchRequestError
from x_search_mcp.tools.search_models import Citation, NormalizedResult

SOURCES_HEADER = "---\n**Sources:**"
DEFAULT_CITATION_LABEL = "Source"


def format_citation(citation: Citation) -> str:
    label = (citation.title or "").strip() or DEFAULT_CITATION_LABEL
    return f"- {label}: {citation.url}"


def render_result(result: NormalizedResult) -> str:
    """Append the citation list (if any) below the response text."""
    if not result.citations:
        return result.text
    lines = [format_citation(citation) for citation in result.citations]
    return "\n\n".join((result.text, SOURCES_HEADER + "\n" + "\n".join(lines)))


def render_error(error: GrokSearchError) -> str:
    if isinstance(error, SearchRequestError):
        return f"Invalid search options ({error.kind.value}): {error.message}"
    if error.kind is SearchErrorKind.PROVIDER_REPORTED:
        return f"xAI API error: {error.message}"
    return error.message


__all__ = ["format_citation", "render_error", "render_result"]
