"""Collapse a provider payload into one deduplicated text plus its citations."""

from __future__ import annotations

from collections.abc import Mapping

from x_search_mcp.errors import GrokResponseError, SearchErrorKind
from x_search_mcp.tools.search_models import EMPTY_RESPONSE_TEXT, NormalizedResult
from x_search_mcp.tools.xai_protocol import (
    ProviderFailure,
    ProviderOutput,
    parse_provider_payload,
)

FRAGMENT_SEPARATOR = "\n\n"


class _FragmentCollector:
    """Ordered set of trimmed text fragments; exact-match dedup."""

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self.fragments: list[str] = []

    def accept(self, value: str | None) -> None:
        if value is None:
            return
        trimmed = value.strip()
        if not trimmed or trimmed in self._seen:
            return
        self._seen.add(trimmed)
        self.fragments.append(trimmed)


def extract_fragments(payload: ProviderOutput) -> list[str]:
    """Return distinct non-blank fragments, convenience `output_text` first."""
    collector = _FragmentCollector()
    collector.accept(payload.output_text)

    if payload.output is None:
        return collector.fragments

    for block in payload.output:
        collector.accept(block.text)
        if isinstance(block.content, str):
            collector.accept(block.content)
            continue
        if block.content is not None:
            for part in block.content:
                collector.accept(part.text)

    return collector.fragments


def normalize_output(payload: ProviderOutput) -> NormalizedResult:
    fragments = extract_fragments(payload)
    text = FRAGMENT_SEPARATOR.join(fragments) if fragments else EMPTY_RESPONSE_TEXT
    return NormalizedResult(text=text, citations=payload.citations)


def normalize_response(raw: Mapping[str, object]) -> NormalizedResult:
    """Normalize a decoded Responses API JSON object.

    Raises `GrokResponseError(PROVIDER_REPORTED)` when the payload carries a
    top-level `error`; output fields are not read in that case.

    Citations keep provider order and duplicates, except entries with no usable
    `url`, which are dropped since they cannot be rendered as a source line.
    """

    payload = parse_provider_payload(raw)
    if isinstance(payload, ProviderFailure):
        raise GrokResponseError(SearchErrorKind.PROVIDER_REPORTED, payload.message)
    return normalize_output(payload)


__all__ = [
    "FRAGMENT_SEPARATOR",
    "extract_fragments",
    "normalize_output",
    "normalize_response",
]
