"""Readable failure messages for Shipping API error responses.

Request validation failures come back from FastAPI as
``{"detail": [{"loc": [...], "msg": "..."}]}``; domain errors
(unknown cargo, voyage or location, invalid arguments) come back as
``{"error": {"field": ["message", ...]}}`` or ``{"error": "message"}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_MAX_LENGTH = 300


def _field_messages(errors: dict) -> str:
    parts = []
    for name, messages in errors.items():
        if isinstance(messages, list):
            messages = ", ".join(str(m) for m in messages)
        parts.append(f"{name}: {messages}")
    return " | ".join(parts)


def extract_error_detail(response: Response) -> str:
    """Return a compact description of the error carried by ``response``."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:_MAX_LENGTH] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:_MAX_LENGTH]

    detail = body.get("detail")
    if isinstance(detail, list):
        return " | ".join(
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', err)}" for err in detail
        )

    error = body.get("error")
    if isinstance(error, dict):
        return _field_messages(error)
    if error is not None:
        return str(error)

    return str(body)[:_MAX_LENGTH]


def failure(action: str, response: Response) -> str:
    return f"{action} failed: {response.status_code} {extract_error_detail(response)}"
