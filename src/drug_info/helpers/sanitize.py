"""
Value sanitizers for untyped label documents.

Every function here is total: invalid or empty input maps to None instead of
raising, and no function returns an empty string, list or dict for missing
data. Callers treat None as "absent".
"""

from collections.abc import Mapping
from typing import Any

_SEQUENCE_TYPES = (list, tuple)


def sanitize_scalar(value: Any) -> str | None:
    """Coerce a value to trimmed, non-empty text.

    Strings are stripped; numbers are stringified. Booleans, containers and
    None have no scalar text and map to None.
    """
    if isinstance(value, str):
        cleaned = value.strip()
        return cleaned or None
    # bool is an int subclass but is not a number here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def sanitize_string_list(value: Any) -> list[str] | None:
    """Coerce a value to a non-empty list of clean strings.

    A bare non-blank string is promoted to a one-element list.
    """
    if isinstance(value, _SEQUENCE_TYPES):
        cleaned = [item for item in map(sanitize_scalar, value) if item is not None]
        return cleaned or None
    if isinstance(value, str):
        scalar = sanitize_scalar(value)
        return [scalar] if scalar is not None else None
    return None


def sanitize_object(value: Any) -> dict[str, Any] | None:
    """Recursively sanitize a mapping, pruning keys that end up absent.

    Strings go through sanitize_scalar, sequences through
    sanitize_string_list and nested mappings recurse. Other values (numbers,
    booleans) are kept as-is. A mapping with no surviving keys is None.
    """
    if not isinstance(value, Mapping):
        return None

    sanitized: dict[str, Any] = {}
    for key, item in value.items():
        if item is None:
            continue
        if isinstance(item, str):
            cleaned = sanitize_scalar(item)
        elif isinstance(item, _SEQUENCE_TYPES):
            cleaned = sanitize_string_list(item)
        elif isinstance(item, Mapping):
            cleaned = sanitize_object(item)
        else:
            cleaned = item
        if cleaned is not None:
            sanitized[key] = cleaned

    return sanitized or None


def extract_first_text_value(value: Any) -> str | None:
    """Return the first non-blank string value of a mapping, sanitized."""
    if not isinstance(value, Mapping):
        return None
    for item in value.values():
        if isinstance(item, str) and item.strip():
            return sanitize_scalar(item)
    return None
