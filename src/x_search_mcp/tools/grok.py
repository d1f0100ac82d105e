"""HTTP client for Grok searches over the xAI Responses API."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import httpx
from opentelemetry import trace
from opentelemetry.trace import SpanKind

from x_search_mcp.errors import GrokResponseError, GrokSearchError, SearchErrorKind
from x_search_mcp.tools.normalize import normalize_response
from x_search_mcp.tools.request_builder import build_search_request
from x_search_mcp.tools.search_models import NormalizedResult, SearchOptions, SearchRequestBody

_LOGGER = logging.getLogger("x_search_mcp.tools.grok.calls")

RESPONSES_PATH = "/responses"


class GrokClient:
    """Lightweight async client for `POST /responses` with server-side search tools.

    One request per search, no retries. Failures are raised as `GrokSearchError`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("xAI API key must be provided")
        normalized_base = base_url.rstrip("/")
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            base_url=normalized_base,
            timeout=httpx.Timeout(timeout),
        )
        self._api_key = api_key
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def build_request(
        self,
        prompt: str,
        options: SearchOptions,
        *,
        system_prompt: str | None = None,
    ) -> SearchRequestBody:
        return build_search_request(
            model=self._model,
            prompt=prompt,
            options=options,
            system_prompt=system_prompt,
        )

    async def search(
        self,
        prompt: str,
        options: SearchOptions | None = None,
        *,
        system_prompt: str | None = None,
    ) -> NormalizedResult:
        """Validate, send and normalize a single search."""
        request = self.build_request(prompt, options or SearchOptions(), system_prompt=system_prompt)
        return await self.send(request)

    async def send(self, request: SearchRequestBody) -> NormalizedResult:
        payload = request.to_payload()
        tracer = trace.get_tracer("x_search_mcp.tools.grok")
        with tracer.start_as_current_span(
            "grok.responses",
            kind=SpanKind.CLIENT,
            attributes={
                "http.method": "POST",
                "http.target": RESPONSES_PATH,
                "grok.model": request.model,
                "grok.tools": request.tool_types,
            },
        ) as span:
            start = time.perf_counter()
            try:
                resp = await self._send(payload)
                span.set_attribute("http.status_code", resp.status_code)
                data = self._parse_response(resp)
                result = normalize_response(data)
            except GrokSearchError as exc:
                span.set_attribute("grok.error", exc.kind.value)
                _LOGGER.warning(
                    "grok.request.failed",
                    extra={
                        "data": {
                            "kind": exc.kind.value,
                            "status_code": exc.status_code,
                            "model": request.model,
                            "tools": request.tool_types,
                            "latency_ms": round((time.perf_counter() - start) * 1000, 2),
                        },
                        "json_fields": {"request": payload, "response_body": exc.body},
                    },
                )
                raise

            latency_ms = round((time.perf_counter() - start) * 1000, 2)
            span.set_attributes(
                {
                    "grok.citation_count": len(result.citations),
                    "grok.empty": result.is_empty,
                }
            )
            _LOGGER.info(
                "grok.request.complete",
                extra={
                    "data": {
                        "method": "POST",
                        "path": RESPONSES_PATH,
                        "status_code": resp.status_code,
                        "model": request.model,
                        "tools": request.tool_types,
                        "latency_ms": latency_ms,
                        "text_chars": len(result.text),
                        "citation_count": len(result.citations),
                        "empty": result.is_empty,
                    },
                    "json_fields": {"request": payload, "response_raw": data},
                },
            )
            return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # internal

    async def _send(self, payload: dict[str, Any]) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            return await self._client.post(RESPONSES_PATH, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            raise GrokResponseError(
                SearchErrorKind.TRANSPORT_ERROR,
                f"xAI API request error: {exc.__class__.__name__}: {exc}",
            ) from exc

    @staticmethod
    def _parse_response(resp: httpx.Response) -> dict[str, Any]:
        if not resp.is_success:
            # error bodies are not guaranteed to be JSON
            raise GrokResponseError(
                SearchErrorKind.TRANSPORT_ERROR,
                f"xAI API error {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )
        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise GrokResponseError(
                SearchErrorKind.MALFORMED_PAYLOAD,
                f"xAI API returned a non-JSON body (status {resp.status_code})",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        if not isinstance(data, dict):
            raise GrokResponseError(
                SearchErrorKind.MALFORMED_PAYLOAD,
                f"xAI API response was not a JSON object (got {type(data).__name__})",
                status_code=resp.status_code,
            )
        return data


__all__ = ["GrokClient", "RESPONSES_PATH"]
