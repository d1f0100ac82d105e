"""Typed boundary for raw xAI Responses API payloads.

Nothing in the payload is trusted: every field is read through a type-checked
accessor and comes out as an optional. Downstream code sees either a
`ProviderFailure` or a `ProviderOutput`, never the raw JSON.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from x_search_mcp.tools.search_models import Citation


@dataclass(frozen=True, slots=True)
class OutputPart:
    text: str | None = None


@dataclass(frozen=True, slots=True)
class OutputBlock:
    text: str | None = None
    content: str | tuple[OutputPart, ...] | None = None


@dataclass(frozen=True, slots=True)
class ProviderOutput:
    output_text: str | None = None
    output: tuple[OutputBlock, ...] | None = None
    citations: tuple[Citation, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ProviderFailure:
    message: str


ProviderPayload = ProviderOutput | ProviderFailure

UNKNOWN_PROVIDER_ERROR = "provider reported an error without a message"


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _field(container: object, key: str) -> object:
    if isinstance(container, Mapping):
        return container.get(key)
    return None


def _parse_part(raw: object) -> OutputPart:
    return OutputPart(text=_optional_str(_field(raw, "text")))


def _parse_block(raw: object) -> OutputBlock:
    content = _field(raw, "content")
    parsed_content: str | tuple[OutputPart, ...] | None
    if isinstance(content, str):
        parsed_content = content
    elif isinstance(content, list):
        parsed_content = tuple(_parse_part(part) for part in content)
    else:
        parsed_content = None
    return OutputBlock(text=_optional_str(_field(raw, "text")), content=parsed_content)


def _parse_citation(raw: object) -> Citation | None:
    # xAI returns either bare URL strings or {url, title} objects.
    if isinstance(raw, str):
        return Citation(url=raw) if raw.strip() else None
    url = _optional_str(_field(raw, "url"))
    if not url:
        return None
    return Citation(url=url, title=_optional_str(_field(raw, "title")))


def _parse_failure(raw_error: object) -> ProviderFailure | None:
    if not raw_error or (isinstance(raw_error, str) and not raw_error.strip()):
        return None
    if isinstance(raw_error, str):
        return ProviderFailure(message=raw_error.strip())
    message = _optional_str(_field(raw_error, "message"))
    if message is None or not message.strip():
        return ProviderFailure(message=UNKNOWN_PROVIDER_ERROR)
    return ProviderFailure(message=message)


def parse_provider_payload(raw: Mapping[str, object]) -> ProviderPayload:
    """Convert a decoded JSON object into a tagged provider payload."""
    failure = _parse_failure(raw.get("error"))
    if failure is not None:
        return failure

    output = raw.get("output")
    blocks = tuple(_parse_block(block) for block in output) if isinstance(output, list) else None

    citations: list[Citation] = []
    raw_citations = raw.get("citations")
    if isinstance(raw_citations, list):
        for entry in raw_citations:
            citation = _parse_citation(entry)
            if citation is not None:
                citations.append(citation)

    return ProviderOutput(
        output_text=_optional_str(raw.get("output_text")),
        output=blocks,
        citations=tuple(citations),
    )


__all__ = [
    "OutputBlock",
    "OutputPart",
    "ProviderFailure",
    "ProviderOutput",
    "ProviderPayload",
    "UNKNOWN_PROVIDER_ERROR",
    "parse_provider_payload",
]
