from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from x_search_mcp.tools.grok import GrokClient

BASE_URL = "https://api.x.test/v1"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def anyio_backend() -> str:
    # Force AnyIO-managed tests to use asyncio only
    return "asyncio"


@pytest.fixture
def make_grok_client() -> Callable[[Handler], GrokClient]:
    def factory(handler: Handler) -> GrokClient:
        return GrokClient(
            base_url=BASE_URL,
            api_key="test-key",
            model="grok-test",
            client=httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)),
        )

    return factory
