"""
Error helpers for user-facing diagnostics.
"""

from collections.abc import Mapping
from typing import Any, Optional


def build_error(
    error: str,
    *,
    details: Optional[str] = None,
    hint: Optional[str] = None,
    source: Optional[str] = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": error}
    if details:
        payload["details"] = details
    if hint:
        payload["hint"] = hint
    if source is not None:
        payload["source"] = source
    return payload


def error_lines(payload: Mapping[str, Any]) -> list[str]:
    lines = []
    error = payload.get("error") or "Unknown error."
    lines.append(f"Error: {error}")
    source = payload.get("source")
    if source is not None:
        lines.append(f"Input: {source}")
    details = payload.get("details")
    if details:
        lines.append(f"Details: {details}")
    hint = payload.get("hint")
    if hint:
        lines.append(f"Hint: {hint}")
    return lines
