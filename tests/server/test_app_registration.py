from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from x_search_mcp.config.settings import Settings
from x_search_mcp.config.xai import XaiSettings
from x_search_mcp.server.app import SERVER_NAME, build_client, build_server
from x_search_mcp.tools.grok import GrokClient

pytestmark = pytest.mark.anyio("asyncio")

MakeClient = Callable[[Callable[[httpx.Request], httpx.Response]], GrokClient]


def _unused(request: httpx.Request) -> httpx.Response:
    raise AssertionError("no HTTP expected")


async def test_server_registers_all_tools(make_grok_client: MakeClient) -> None:
    client = make_grok_client(_unused)
    server = build_server(client)
    try:
        tools = {tool.name: tool for tool in await server.list_tools()}
    finally:
        await client.aclose()

    assert server.name == SERVER_NAME
    assert set(tools) == {
        "search_x",
        "x_trend_research",
        "search_x_user",
        "x_context_research",
        "grok_search",
    }
    search_x_schema = tools["search_x"].inputSchema
    assert search_x_schema["required"] == ["query"]
    assert set(search_x_schema["properties"]) == {"query", "hours", "locale"}

    grok_schema = tools["grok_search"].inputSchema
    assert set(grok_schema["properties"]) >= {
        "prompt",
        "system_prompt",
        "enable_x_search",
        "enable_web_search",
        "from_date",
        "to_date",
        "allowed_handles",
        "excluded_handles",
        "enable_image_understanding",
        "enable_video_understanding",
        "temperature",
    }
    assert tools["search_x_user"].annotations is not None
    assert tools["search_x_user"].annotations.readOnlyHint is True


def test_build_client_uses_settings() -> None:
    settings = Settings(
        xai=XaiSettings(
            XAI_API_KEY="secret",
            XAI_BASE_URL="https://api.x.test/v1/",
            XAI_MODEL="grok-custom",
        )
    )

    client = build_client(settings)

    assert client.model == "grok-custom"
