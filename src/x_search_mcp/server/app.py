"""FastMCP server exposing the Grok search tools."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, ToolAnnotations
from pydantic import Field

from x_search_mcp.config.settings import Settings
from x_search_mcp.server import prompts
from x_search_mcp.server.service import SearchToolService
from x_search_mcp.tools.grok import GrokClient
from x_search_mcp.tools.search_models import DEFAULT_TEMPERATURE, MAX_FILTER_HANDLES

SERVER_NAME = "x-search-mcp"

_READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=False,
    openWorldHint=True,
)

DateArg = Annotated[
    str | None,
    Field(description="Calendar date in YYYY-MM-DD form (caller's local day)"),
]


def build_client(settings: Settings) -> GrokClient:
    return GrokClient(
        base_url=settings.xai.xai_base_url,
        api_key=settings.xai_api_key_value,
        model=settings.xai.xai_model,
        timeout=settings.xai.xai_timeout_seconds,
    )


def build_server(client: GrokClient) -> FastMCP:
    """Register every tool on a new FastMCP instance; the client is closed on shutdown."""

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await client.aclose()

    mcp = FastMCP(SERVER_NAME, lifespan=lifespan)
    register_tools(mcp, SearchToolService(client))
    return mcp


def register_tools(mcp: FastMCP, service: SearchToolService) -> None:
    @mcp.tool(
        name="search_x",
        description=(
            "Search X (Twitter) posts via Grok. Returns recent posts matching the query "
            "with engagement metrics and URLs."
        ),
        annotations=_READ_ONLY,
    )
    async def search_x(
        query: Annotated[str, Field(description="Search query (e.g. 'Claude Code skills', 'AI agents')")],
        hours: Annotated[int, Field(ge=1, description="How many hours back to search (default: 24)")] = 24,
        locale: Annotated[prompts.Locale, Field(description="Language filter")] = "global",
    ) -> CallToolResult:
        return await service.search_x(query=query, hours=hours, locale=locale)

    @mcp.tool(
        name="x_trend_research",
        description=(
            "Deep X trend research: discovers topic clusters, representative posts, "
            "and generates content ideas."
        ),
        annotations=_READ_ONLY,
    )
    async def x_trend_research(
        topic: Annotated[str, Field(description="Research topic (e.g. 'AI agents', 'Web3 DeFi')")],
        audience: Annotated[prompts.TrendAudience, Field(description="Target audience")] = "both",
        count: Annotated[int, Field(ge=1, description="Number of content ideas to generate (default: 5)")] = 5,
        hours: Annotated[int, Field(ge=1, description="Hours to look back (default: 48)")] = 48,
        locale: Annotated[prompts.Locale, Field(description="Language focus")] = "ja",
    ) -> CallToolResult:
        return await service.x_trend_research(
            topic=topic,
            audience=audience,
            count=count,
            hours=hours,
            locale=locale,
        )

    @mcp.tool(
        name="search_x_user",
        description="Search recent posts from a specific X (Twitter) user.",
        annotations=_READ_ONLY,
    )
    async def search_x_user(
        username: Annotated[str, Field(description="X username without @ (e.g. 'elonmusk')")],
        query: Annotated[str | None, Field(description="Optional: filter by topic within user's posts")] = None,
        days: Annotated[int, Field(ge=1, description="How many days back to search (default: 7)")] = 7,
    ) -> CallToolResult:
        return await service.search_x_user(username=username, query=query, days=days)

    @mcp.tool(
        name="x_context_research",
        description=(
            "Research context for article writing: gathers primary sources, definitions, "
            "counter-arguments, and dated facts from X and web."
        ),
        annotations=_READ_ONLY,
    )
    async def x_context_research(
        topic: Annotated[str, Field(description="Article topic to research")],
        goal: Annotated[str | None, Field(description="What the article aims to achieve")] = None,
        audience: Annotated[prompts.ContextAudience, Field(description="Target audience")] = "general",
        days: Annotated[int, Field(ge=1, description="Days to look back (default: 30)")] = 30,
    ) -> CallToolResult:
        return await service.x_context_research(topic=topic, goal=goal, audience=audience, days=days)

    @mcp.tool(
        name="grok_search",
        description=(
            "Run a Grok search with a caller-written prompt and full control over the "
            "X search and web search options."
        ),
        annotations=_READ_ONLY,
    )
    async def grok_search(
        prompt: Annotated[str, Field(description="Instruction sent to Grok")],
        system_prompt: Annotated[
            str | None, Field(description="Optional instructions placed ahead of the prompt")
        ] = None,
        enable_x_search: bool = True,
        enable_web_search: bool = False,
        from_date: DateArg = None,
        to_date: DateArg = None,
        allowed_handles: Annotated[
            list[str] | None,
            Field(description=f"Only search these X handles (max {MAX_FILTER_HANDLES})"),
        ] = None,
        excluded_handles: Annotated[
            list[str] | None,
            Field(description=f"Exclude these X handles (max {MAX_FILTER_HANDLES})"),
        ] = None,
        enable_image_understanding: bool = False,
        enable_video_understanding: bool = False,
        temperature: Annotated[float, Field(ge=0.0, le=2.0)] = DEFAULT_TEMPERATURE,
    ) -> CallToolResult:
        return await service.grok_search(
            prompt=prompt,
            system_prompt=system_prompt,
            options={
                "enable_x_search": enable_x_search,
                "enable_web_search": enable_web_search,
                "from_date": from_date,
                "to_date": to_date,
                "allowed_handles": allowed_handles or (),
                "excluded_handles": excluded_handles or (),
                "enable_image_understanding": enable_image_understanding,
                "enable_video_understanding": enable_video_understanding,
                "temperature": temperature,
            },
        )


__all__ = ["SERVER_NAME", "build_client", "build_server", "register_tools"]
