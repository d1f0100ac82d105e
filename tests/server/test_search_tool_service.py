from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date
from typing import Any

import httpx
import pytest
from mcp.types import CallToolResult

from x_search_mcp.server.service import SearchToolService
from x_search_mcp.tools import dates
from x_search_mcp.tools.grok import GrokClient

pytestmark = pytest.mark.anyio("asyncio")

MakeClient = Callable[[Callable[[httpx.Request], httpx.Response]], GrokClient]


@pytest.fixture(autouse=True)
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dates, "today", lambda: date(2026, 10, 19))


def _recording_service(
    make_grok_client: MakeClient,
    response: dict[str, Any] | None = None,
) -> tuple[SearchToolService, list[dict[str, Any]]]:
    bodies: list[dict[str, Any]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=response or {"output_text": "result"}, request=request)

    return SearchToolService(make_grok_client(handler)), bodies


def _text(result: CallToolResult) -> str:
    assert len(result.content) == 1
    return result.content[0].text  # type: ignore[union-attr]


async def test_search_x_uses_day_window(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.search_x(query="ai agents", hours=30, locale="en")

    assert result.isError is False
    assert _text(result) == "result"
    body = bodies[0]
    assert body["tools"] == [{"type": "x_search", "from_date": "2026-10-17", "to_date": "2026-10-19"}]
    content = body["input"][0]["content"]
    assert body["input"][0]["role"] == "user"
    assert "Language filter: en" in content
    assert content.endswith("Search X for: ai agents")


async def test_trend_research_enables_web_search(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    await service.x_trend_research(topic="DeFi", audience="engineer", count=3, hours=48, locale="global")

    body = bodies[0]
    assert body["tools"] == [
        {"type": "x_search", "from_date": "2026-10-17", "to_date": "2026-10-19"},
        {"type": "web_search"},
    ]
    content = body["input"][0]["content"]
    assert "Time range: last 48 hours (as of 2026-10-19)" in content
    assert "### Step 3: Generate 3 content ideas" in content
    assert "Search globally across languages" in content


async def test_search_x_user_scopes_to_handle(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    await service.search_x_user(username="@xai", query="grok 5", days=7)

    body = bodies[0]
    assert body["tools"] == [
        {
            "type": "x_search",
            "from_date": "2026-10-12",
            "to_date": "2026-10-19",
            "allowed_x_handles": ["xai"],
        }
    ]
    assert body["input"][0]["content"].endswith('Find recent posts from @xai about: grok 5')


async def test_search_x_user_rejects_blank_username(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.search_x_user(username=" @ ")

    assert result.isError is True
    assert bodies == []


async def test_context_research_default_goal(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    await service.x_context_research(topic="MCP servers")

    body = bodies[0]
    assert body["tools"][0]["from_date"] == "2026-09-19"
    assert body["tools"][1] == {"type": "web_search"}
    assert "Goal: Provide comprehensive background for article writing" in body["input"][0]["content"]


async def test_results_include_rendered_citations(make_grok_client: MakeClient) -> None:
    service, _ = _recording_service(
        make_grok_client,
        {"output_text": "summary", "citations": [{"url": "https://x.com/a/status/1", "title": "post"}]},
    )

    result = await service.search_x(query="q")

    assert _text(result) == "summary\n\n---\n**Sources:**\n- post: https://x.com/a/status/1"


async def test_grok_search_conflicting_filters_is_error_result(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(
        prompt="anything",
        options={"allowed_handles": ["a"], "excluded_handles": ["b"]},
    )

    assert result.isError is True
    assert "conflicting_filter" in _text(result)
    assert bodies == []


async def test_grok_search_inverted_dates_is_error_result(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(
        prompt="anything",
        options={"from_date": "2026-10-19", "to_date": "2026-10-01"},
    )

    assert result.isError is True
    assert "date_range_inverted" in _text(result)
    assert bodies == []


async def test_grok_search_passes_caller_options(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(
        prompt="What is @xai announcing?",
        system_prompt="Answer briefly.",
        options={
            "enable_web_search": True,
            "excluded_handles": ["spam"],
            "enable_image_understanding": True,
            "temperature": 0.0,
        },
    )

    assert result.isError is False
    body = bodies[0]
    assert body["temperature"] == 0.0
    assert body["tools"] == [
        {"type": "x_search", "excluded_x_handles": ["spam"], "enable_image_understanding": True},
        {"type": "web_search"},
    ]
    assert body["input"] == [{"role": "user", "content": "Answer briefly.\n\nWhat is @xai announcing?"}]


async def test_grok_search_invalid_option_value_is_error_result(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(prompt="anything", options={"temperature": 3.0})

    assert result.isError is True
    assert bodies == []


async def test_grok_search_blank_prompt_is_error_result(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(prompt="  ", options={})

    assert result.isError is True
    assert bodies == []


async def test_provider_error_becomes_error_result(make_grok_client: MakeClient) -> None:
    service, _ = _recording_service(make_grok_client, {"error": {"message": "quota exceeded"}})

    result = await service.search_x(query="q")

    assert result.isError is True
    assert _text(result) == "xAI API error: quota exceeded"


async def test_transport_error_becomes_error_result(make_grok_client: MakeClient) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text='{"error":"bad key"}', request=request)

    service = SearchToolService(make_grok_client(handler))

    result = await service.search_x(query="q")

    assert result.isError is True
    assert _text(result) == 'xAI API error 401: {"error":"bad key"}'


async def test_grok_search_rejects_blank_handle_filter(make_grok_client: MakeClient) -> None:
    service, bodies = _recording_service(make_grok_client)

    result = await service.grok_search(prompt="latest from xai", options={"allowed_handles": ["@"]})

    assert result.isError is True
    assert "blank X handle" in _text(result)
    assert bodies == []
