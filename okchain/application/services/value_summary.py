# okchain/application/services/value_summary.py
from __future__ import annotations

from typing import Any

ELLIPSIS = "..."


def describe_value(value: Any, include_values: bool, max_length: int) -> str:
    """
    Render a value for a log field.

    Only the type name is logged unless ``include_values`` is on, since step
    values and failure reasons may hold user data.
    """
    if not include_values:
        return f"<{type(value).__name__}>"
    return truncate(repr(value), max_length)


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS
