"""Validation and assembly of Grok Responses API search requests."""

from __future__ import annotations

import re
from datetime import date

from x_search_mcp.errors import SearchErrorKind, SearchRequestError
from x_search_mcp.tools.search_models import (
    MAX_FILTER_HANDLES,
    InputMessage,
    SearchOptions,
    SearchRequestBody,
    WebSearchTool,
    XSearchTool,
)

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_calendar_date(value: str) -> bool:
    """True for a zero-padded `YYYY-MM-DD` string naming a real day."""
    if not _ISO_DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def check_search_options(options: SearchOptions) -> SearchRequestError | None:
    """Return the first violated constraint, or None when the options are usable."""
    if options.allowed_handles and options.excluded_handles:
        return SearchRequestError(
            SearchErrorKind.CONFLICTING_FILTER,
            "allowed_handles and excluded_handles cannot be used together",
        )
    for name, handles in (
        ("allowed_handles", options.allowed_handles),
        ("excluded_handles", options.excluded_handles),
    ):
        if len(handles) > MAX_FILTER_HANDLES:
            return SearchRequestError(
                SearchErrorKind.TOO_MANY_HANDLES,
                f"{name} accepts at most {MAX_FILTER_HANDLES} handles (got {len(handles)})",
            )
    for name, value in (("from_date", options.from_date), ("to_date", options.to_date)):
        if value is not None and not is_calendar_date(value):
            return SearchRequestError(
                SearchErrorKind.MALFORMED_DATE,
                f"{name} must be a calendar date in YYYY-MM-DD form (got {value!r})",
            )
    # zero-padded ISO dates order lexicographically
    if options.from_date is not None and options.to_date is not None and options.from_date > options.to_date:
        return SearchRequestError(
            SearchErrorKind.DATE_RANGE_INVERTED,
            f"from_date {options.from_date} is after to_date {options.to_date}",
        )
    return None


def build_x_search_tool(options: SearchOptions) -> XSearchTool:
    return XSearchTool(
        from_date=options.from_date,
        to_date=options.to_date,
        allowed_x_handles=list(options.allowed_handles) or None,
        excluded_x_handles=list(options.excluded_handles) or None,
        enable_image_understanding=True if options.enable_image_understanding else None,
        enable_video_understanding=True if options.enable_video_understanding else None,
    )


def build_search_request(
    *,
    model: str,
    prompt: str,
    options: SearchOptions,
    system_prompt: str | None = None,
) -> SearchRequestBody:
    """Validate `options` and assemble the request body.

    The request carries a single caller-authored user message. A `system_prompt`
    is folded into that message ahead of the prompt rather than sent as a separate
    `system` role entry.
    """

    if not prompt.strip():
        raise ValueError("search prompt must be non-empty")
    violation = check_search_options(options)
    if violation is not None:
        raise violation

    tools: list[XSearchTool | WebSearchTool] = []
    if options.enable_x_search:
        tools.append(build_x_search_tool(options))
    if options.enable_web_search:
        tools.append(WebSearchTool())

    instruction = prompt.strip()
    if system_prompt and system_prompt.strip():
        instruction = f"{system_prompt.strip()}\n\n{instruction}"

    return SearchRequestBody(
        model=model,
        temperature=options.temperature,
        input=(InputMessage(content=instruction),),
        tools=tuple(tools),
    )


__all__ = [
    "build_search_request",
    "build_x_search_tool",
    "check_search_options",
    "is_calendar_date",
]
