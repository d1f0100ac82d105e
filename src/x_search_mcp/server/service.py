"""Tool handlers: turn tool arguments into searches and searches into tool results."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from x_search_mcp.errors import GrokSearchError
from x_search_mcp.server import prompts
from x_search_mcp.tools import dates
from x_search_mcp.tools.grok import GrokClient
from x_search_mcp.tools.rendering import render_error, render_result
from x_search_mcp.tools.search_models import SearchOptions

_LOGGER = logging.getLogger("x_search_mcp.server.service")


def text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class SearchToolService:
    """Backs every registered tool with the same Grok search core.

    Each handler returns a `CallToolResult`; classified failures come back as
    `isError` results instead of propagating into the MCP runtime.
    """

    def __init__(self, client: GrokClient) -> None:
        self._client = client

    async def run_search(
        self,
        *,
        tool: str,
        prompt: str,
        options: SearchOptions,
        system_prompt: str | None = None,
    ) -> CallToolResult:
        try:
            result = await self._client.search(prompt, options, system_prompt=system_prompt)
        except GrokSearchError as exc:
            _LOGGER.warning(
                "tool.search.failed",
                extra={"data": {"tool": tool, "kind": exc.kind.value, "status_code": exc.status_code}},
            )
            return text_result(render_error(exc), is_error=True)
        except ValueError as exc:
            return text_result(f"Invalid search request: {exc}", is_error=True)
        return text_result(render_result(result))

    async def search_x(self, *, query: str, hours: int = 24, locale: prompts.Locale = "global") -> CallToolResult:
        days_back = dates.days_back_for_hours(hours)
        return await self.run_search(
            tool="search_x",
            system_prompt=prompts.search_x_instructions(locale=locale),
            prompt=prompts.search_x_request(query),
            options=SearchOptions(
                enable_x_search=True,
                from_date=dates.days_ago_iso(days_back),
                to_date=dates.today_iso(),
            ),
        )

    async def x_trend_research(
        self,
        *,
        topic: str,
        audience: prompts.TrendAudience = "both",
        count: int = 5,
        hours: int = 48,
        locale: prompts.Locale = "ja",
    ) -> CallToolResult:
        today = dates.today_iso()
        days_back = dates.days_back_for_hours(hours)
        return await self.run_search(
            tool="x_trend_research",
            system_prompt=prompts.trend_research_instructions(
                topic=topic,
                audience=audience,
                count=count,
                hours=hours,
                locale=locale,
                today=today,
            ),
            prompt=prompts.trend_research_request(topic),
            options=SearchOptions(
                enable_x_search=True,
                enable_web_search=True,
                from_date=dates.days_ago_iso(days_back),
                to_date=today,
            ),
        )

    async def search_x_user(self, *, username: str, query: str | None = None, days: int = 7) -> CallToolResult:
        handle = username.strip().removeprefix("@")
        if not handle:
            return text_result("Invalid search request: username must be non-empty", is_error=True)
        return await self.run_search(
            tool="search_x_user",
            system_prompt=prompts.user_posts_instructions(username=handle, query=query, days=days),
            prompt=prompts.user_posts_request(handle, query),
            options=SearchOptions(
                enable_x_search=True,
                allowed_handles=(handle,),
                from_date=dates.days_ago_iso(days),
                to_date=dates.today_iso(),
            ),
        )

    async def x_context_research(
        self,
        *,
        topic: str,
        goal: str | None = None,
        audience: prompts.ContextAudience = "general",
        days: int = 30,
    ) -> CallToolResult:
        return await self.run_search(
            tool="x_context_research",
            system_prompt=prompts.context_research_instructions(
                topic=topic,
                goal=goal,
                audience=audience,
                days=days,
            ),
            prompt=prompts.context_research_request(topic),
            options=SearchOptions(
                enable_x_search=True,
                enable_web_search=True,
                from_date=dates.days_ago_iso(days),
                to_date=dates.today_iso(),
            ),
        )

    async def grok_search(
        self,
        *,
        prompt: str,
        options: Mapping[str, object],
        system_prompt: str | None = None,
    ) -> CallToolResult:
        """Caller-controlled search: the prompt and every search option come from the caller."""
        try:
            search_options = SearchOptions.model_validate(dict(options))
        except ValidationError as exc:
            return text_result(f"Invalid search request: {exc}", is_error=True)
        return await self.run_search(
            tool="grok_search",
            prompt=prompt,
            options=search_options,
            system_prompt=system_prompt,
        )


__all__ = ["SearchToolService", "text_result"]
