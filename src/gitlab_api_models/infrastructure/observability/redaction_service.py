import re
from collections.abc import Mapping
from typing import Any

# (prefix)(secret) pairs; group 2 is replaced
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(private_token=)([a-zA-Z0-9\-\._~+/=]+)",
    r"(glpat-)([a-zA-Z0-9\-_]{8,})",
]

SENSITIVE_KEYS = {
    "authorization",
    "private-token",
    "private_token",
    "job-token",
    "token",
    "password",
    "secret",
}

REDACTED = "[REDACTED]"


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, rf"\1{REDACTED}", redacted_text, flags=re.IGNORECASE)
    return redacted_text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    elif isinstance(value, Mapping):
        return redact_dict(value)
    elif isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: Mapping[str, Any]) -> dict[str, Any]:
    """
    Redacts sensitive keys and values in a mapping (recursive).
    Works for plain dicts as well as httpx.Headers.
    """
    new_obj = {}
    for k, v in obj.items():
        key_lower = str(k).lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            new_obj[k] = REDACTED
        else:
            new_obj[k] = redact_value(v)
    return new_obj
