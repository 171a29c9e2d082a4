"""Text extraction for label sections."""

import re
from collections.abc import Mapping
from typing import Any

from drug_info.constants import SECTION_JOINER
from drug_info.helpers.sanitize import (
    extract_first_text_value,
    sanitize_scalar,
)

_TAG_RE = re.compile(r"<[^>]*?>")
_WHITESPACE_RE = re.compile(r"\s+")


def _join_items(items: list | tuple) -> str | None:
    parts = [part for part in map(sanitize_scalar, items) if part is not None]
    return SECTION_JOINER.join(parts) if parts else None


def extract_text(section: Any) -> str | None:
    """Flatten a label section into a single text blob.

    A section may be a string, a mapping with a ``text`` field, a mapping
    with an ``items`` list, or any other mapping. ``text`` wins over
    ``items``; mappings with neither fall back to their first string value.
    HTML is left untouched here.
    """
    if not section:
        return None

    if isinstance(section, str):
        return sanitize_scalar(section)

    if isinstance(section, Mapping):
        text = section.get("text")
        if text:
            return sanitize_scalar(text)

        items = section.get("items")
        if isinstance(items, (list, tuple)):
            return _join_items(items)

        return extract_first_text_value(section)

    # A bare list is read as an items list.
    if isinstance(section, (list, tuple)):
        return _join_items(section)

    return None


def strip_html(html: str | None) -> str:
    """Drop anything that looks like a tag and collapse whitespace.

    Best-effort only: entities are not decoded and malformed markup is not
    repaired.
    """
    if not html:
        return ""
    text = _TAG_RE.sub(" ", html)
    return _WHITESPACE_RE.sub(" ", text).strip()


def join_sections(*texts: str | None) -> str | None:
    """Join the non-empty section texts, or None when there are none."""
    parts = [text for text in texts if text]
    return SECTION_JOINER.join(parts) if parts else None
