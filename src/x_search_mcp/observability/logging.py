"""Logging helpers (formatter + dictConfig builder).

The MCP stdio transport owns stdout, so every handler here writes to stderr.
"""

from __future__ import annotations

import json
import logging
import time
import traceback
import types
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from logging.config import dictConfig
from typing import Any

from opentelemetry import baggage, trace

_PACKAGE_LOGGER_ROOT = "x_search_mcp"


def _compact_json(value: Any, *, limit: int = 512) -> str:
    encoded = json.dumps(value, sort_keys=True, separators=(",", ":"))
    if len(encoded) <= limit:
        return encoded
    return encoded[:limit] + "... (truncated)"


def _structured_payload(record: logging.LogRecord) -> dict[str, Any]:
    record_dict = record.__dict__
    record_data = record_dict.get("data")
    record_json_fields = record_dict.get("json_fields")

    message = record.getMessage()
    sanitized_data: Any | None = None
    if record_data:
        sanitized_data = _sanitize_for_json(record_data)
        message = f"{message} | data={_compact_json(sanitized_data)}"

    payload: dict[str, Any] = {
        "message": message,
        "severity": record.levelname,
        "logger": record.name,
        "timestamp": (
            f"{time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))}"
            f".{int(record.msecs):03d}Z"
        ),
    }
    if record.exc_info:
        payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
    if record.stack_info:
        payload["stack_info"] = str(record.stack_info)
    if sanitized_data is not None:
        payload["data"] = sanitized_data

    if record_json_fields:
        json_fields = _sanitize_for_json(record_json_fields)
        if isinstance(json_fields, Mapping):
            for key, value in json_fields.items():
                if key in payload:
                    payload.setdefault("json_fields", {})[key] = value
                else:
                    payload[key] = value
        else:
            payload["json_fields"] = json_fields

    return payload


class ExtrasFormatter(logging.Formatter):
    """Append structured `data` payloads when present.

    With `json_output=True` every record becomes a single JSON object, including
    `json_fields` extras that the text form leaves out.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        json_output: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        record_dict = record.__dict__
        record_data = record_dict.get("data")

        if self._json_output:
            return json.dumps(_structured_payload(record), sort_keys=True, separators=(",", ":"))

        formatted = super().format(record)
        if record_data:
            try:
                encoded = json.dumps(record_data, sort_keys=True, separators=(",", ":"))
            except TypeError:
                encoded = str(record_data)
            return f"{formatted} | data={encoded}"
        return formatted


class OtelContextLogFilter(logging.Filter):
    """Inject OpenTelemetry trace context + baggage into json_fields."""

    def filter(self, record: logging.LogRecord) -> bool:
        record_dict = record.__dict__
        json_fields = record_dict.get("json_fields")

        if json_fields is None:
            json_fields_map: dict[str, Any] = {}
        elif isinstance(json_fields, Mapping):
            json_fields_map = dict(json_fields)
        else:
            json_fields_map = {"json_fields": json_fields}

        otel_value = json_fields_map.get("otel")
        otel: dict[str, Any] = dict(otel_value) if isinstance(otel_value, Mapping) else {}

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            otel["trace_id"] = f"{span_context.trace_id:032x}"
            otel["span_id"] = f"{span_context.span_id:016x}"

        baggage_values = baggage.get_all()
        if baggage_values:
            otel["baggage"] = {key: str(value) for key, value in baggage_values.items()}

        if not otel:
            return True

        json_fields_map["otel"] = otel
        record_dict["json_fields"] = json_fields_map
        return True


def build_log_config(
    *,
    level: str = "INFO",
    json_output: bool = False,
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""

    loggers: dict[str, dict[str, Any]] = {
        "httpx": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        "httpcore": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        "mcp": {"level": "WARNING", "handlers": ["console"], "propagate": False},
    }
    if extra_loggers:
        loggers.update(extra_loggers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "fmt": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
                "json_output": json_output,
            }
        },
        "filters": {"otel_context": {"()": OtelContextLogFilter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
                "filters": ["otel_context"],
            }
        },
        "root": {"level": level.upper(), "handlers": ["console"]},
        "loggers": loggers,
    }


def _sanitize_for_json(value: Any, depth: int = 10, max_items: int = 200) -> Any:
    """Return a JSON-serializable copy; fallback to string for unknowns."""

    if depth <= 0:
        return "<depth_exceeded>"

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes len={len(value)}>"

    if isinstance(value, (types.BuiltinFunctionType, types.FunctionType, types.MethodType)):
        return f"<callable {value.__name__}>"
    if callable(value):
        return f"<callable {value.__class__.__name__}>"

    if is_dataclass(value) and not isinstance(value, type):
        return _sanitize_for_json(asdict(value), depth - 1, max_items)

    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for idx, (k, v) in enumerate(value.items()):
            if idx >= max_items:
                result["<truncated>"] = f"...{len(value) - idx} more"
                break
            result[str(k)] = _sanitize_for_json(v, depth - 1, max_items)
        return result

    if isinstance(value, (list, tuple, set)):
        out = []
        iterable = list(value)
        for idx, item in enumerate(iterable):
            if idx >= max_items:
                out.append(f"... {len(iterable) - idx} more")
                break
            out.append(_sanitize_for_json(item, depth - 1, max_items))
        return out

    return str(value)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = False,
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> None:
    """Apply the logging config and reattach package loggers to the root handler."""
    logger = logging.getLogger("x_search_mcp.observability.logging")
    start = time.monotonic()
    config = build_log_config(level=level, json_output=json_output, extra_loggers=extra_loggers)
    dictConfig(config)
    package_logger = logging.getLogger(_PACKAGE_LOGGER_ROOT)
    package_logger.setLevel(logging.getLogger().level)
    package_logger.propagate = True
    logger.debug(
        "configured logging",
        extra={"data": {"json_output": json_output, "elapsed_s": round(time.monotonic() - start, 3)}},
    )


__all__ = ["ExtrasFormatter", "OtelContextLogFilter", "build_log_config", "configure_logging"]
