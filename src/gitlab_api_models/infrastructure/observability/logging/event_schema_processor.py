"""Structlog processor that nests flat event dicts into a stable JSON schema.

All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any

from gitlab_api_models.infrastructure.observability.logging.correlation_id_context import (
    CorrelationIdContext,
)

_CONTEXT = CorrelationIdContext()


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "gitlab-api-models"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None) or _CONTEXT.get(),
        "message": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_http(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    method = event_dict.pop("http_method", None)
    if method is None:
        return None
    return {
        "method": method,
        "path": event_dict.pop("http_path", None),
        "status": event_dict.pop("http_status", None),
        "duration_ms": event_dict.pop("http_duration_ms", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {
        "component": component,
        "resource": event_dict.pop("context_resource", None),
        "resource_id": event_dict.pop("context_resource_id", None),
    }


def event_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    http = _build_http(event_dict)
    if http is not None:
        result["http"] = http

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
