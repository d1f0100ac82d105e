from __future__ import annotations

from datetime import date

import pytest

from x_search_mcp.errors import GrokResponseError, SearchErrorKind, SearchRequestError
from x_search_mcp.tools import dates
from x_search_mcp.tools.rendering import render_error, render_result
from x_search_mcp.tools.search_models import EMPTY_RESPONSE_TEXT, Citation, NormalizedResult


def test_render_without_citations_returns_text() -> None:
    assert render_result(NormalizedResult(text="hello")) == "hello"


def test_render_appends_sources_block() -> None:
    result = NormalizedResult(
        text="summary",
        citations=(
            Citation(url="https://x.com/a/status/1", title="Post by @a"),
            Citation(url="https://example.com/article"),
            Citation(url="https://example.com/blank", title="  "),
        ),
    )

    assert render_result(result) == (
        "summary\n\n"
        "---\n"
        "**Sources:**\n"
        "- Post by @a: https://x.com/a/status/1\n"
        "- Source: https://example.com/article\n"
        "- Source: https://example.com/blank"
    )


def test_render_sentinel_with_citations() -> None:
    result = NormalizedResult(text=EMPTY_RESPONSE_TEXT, citations=(Citation(url="https://a.example"),))

    assert render_result(result).startswith(EMPTY_RESPONSE_TEXT + "\n\n---")


def test_render_error_variants() -> None:
    provider = GrokResponseError(SearchErrorKind.PROVIDER_REPORTED, "quota exceeded")
    transport = GrokResponseError(SearchErrorKind.TRANSPORT_ERROR, "xAI API error 500: boom", status_code=500)
    invalid = SearchRequestError(SearchErrorKind.CONFLICTING_FILTER, "pick one")

    assert render_error(provider) == "xAI API error: quota exceeded"
    assert render_error(transport) == "xAI API error 500: boom"
    assert render_error(invalid) == "Invalid search options (conflicting_filter): pick one"


@pytest.mark.parametrize(
    ("hours", "days"),
    [(1, 1), (24, 1), (25, 2), (48, 2), (49, 3)],
)
def test_days_back_for_hours(hours: int, days: int) -> None:
    assert dates.days_back_for_hours(hours) == days


def test_dates_follow_local_calendar(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dates, "today", lambda: date(2026, 3, 1))

    assert dates.today_iso() == "2026-03-01"
    assert dates.days_ago_iso(1) == "2026-02-28"
    assert dates.days_ago_iso(30) == "2026-01-30"
