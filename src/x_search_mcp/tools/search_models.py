"""Request/response models for the Grok Responses API search tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEMPERATURE = 0.3
MAX_FILTER_HANDLES = 10
EMPTY_RESPONSE_TEXT = "(empty response from Grok)"


def _normalize_handles(value: object) -> object:
    if value is None:
        return ()
    if isinstance(value, str):
        value = (value,)
    if not isinstance(value, (list, tuple, set, frozenset)):
        return value
    handles: list[str] = []
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            return value
        handle = item.strip().removeprefix("@").strip()
        if not handle:
            raise ValueError(f"blank X handle: {item!r}")
        # X handles are case-insensitive; the first spelling wins.
        key = handle.casefold()
        if key not in seen:
            seen.add(key)
            handles.append(handle)
    return tuple(handles)


class SearchOptions(BaseModel):
    """Caller-supplied knobs for a single search.

    Cross-field invariants (handle filters, date format and ordering) are checked by
    `check_search_options` so each violation maps to its own error kind.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enable_x_search: bool = True
    enable_web_search: bool = False
    from_date: str | None = None
    to_date: str | None = None
    allowed_handles: tuple[str, ...] = ()
    excluded_handles: tuple[str, ...] = ()
    enable_image_understanding: bool = False
    enable_video_understanding: bool = False
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)

    @field_validator("allowed_handles", "excluded_handles", mode="before")
    @classmethod
    def _dedupe_handles(cls, value: object) -> object:
        return _normalize_handles(value)


class XSearchTool(BaseModel):
    """`x_search` server-side tool descriptor; unset fields are never serialized."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["x_search"] = "x_search"
    from_date: str | None = None
    to_date: str | None = None
    allowed_x_handles: list[str] | None = None
    excluded_x_handles: list[str] | None = None
    enable_image_understanding: Literal[True] | None = None
    enable_video_understanding: Literal[True] | None = None


class WebSearchTool(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["web_search"] = "web_search"


class InputMessage(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    role: Literal["user"] = "user"
    content: str


class SearchRequestBody(BaseModel):
    """Body of `POST /responses`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    model: str
    temperature: float
    input: tuple[InputMessage]
    tools: tuple[XSearchTool | WebSearchTool, ...] = ()
    store: Literal[False] = False

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    @property
    def tool_types(self) -> tuple[str, ...]:
        return tuple(tool.type for tool in self.tools)


@dataclass(frozen=True, slots=True)
class Citation:
    url: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class NormalizedResult:
    """Deduplicated response text plus the provider's citations, in order."""

    text: str
    citations: tuple[Citation, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.text == EMPTY_RESPONSE_TEXT


__all__ = [
    "DEFAULT_TEMPERATURE",
    "EMPTY_RESPONSE_TEXT",
    "MAX_FILTER_HANDLES",
    "Citation",
    "InputMessage",
    "NormalizedResult",
    "SearchOptions",
    "SearchRequestBody",
    "WebSearchTool",
    "XSearchTool",
]
