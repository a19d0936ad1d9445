from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from gitlab_api_models.application.exceptions.provider_error import ProviderError

_RETRYABLE_STATUSES = {429, 500, 502, 503, 504}


@dataclass(frozen=False)
class GitLabApiError(ProviderError):
    """GitLab answered with a non-success status."""

    method: Optional[str] = None
    path: Optional[str] = None
    body: Any = None

    @classmethod
    def from_status(
        cls, status_code: int, method: str, path: str, body: Any = None
    ) -> "GitLabApiError":
        return cls(
            provider="gitlab",
            message=f"{method} {path} failed: {_extract_message(body)}",
            retryable=status_code in _RETRYABLE_STATUSES,
            status_code=status_code,
            error_code=_extract_error_code(body),
            method=method,
            path=path,
            body=body,
        )


@dataclass(frozen=False)
class GitLabTransportError(ProviderError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""


def _extract_message(body: Any) -> str:
    # GitLab reports errors as {"message": ...} or {"error": ...}
    if isinstance(body, dict):
        message = body.get("message") or body.get("error_description") or body.get("error")
        if message is not None:
            return str(message)
    if isinstance(body, str) and body:
        return body[:200]
    return "no error detail"


def _extract_error_code(body: Any) -> Optional[str]:
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
