import re

from drug_info.constants import UNKNOWN_DRUG_SLUG

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def derive_slug(text: str) -> str:
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def slug_or_default(text: str | None) -> str:
    """Derive a slug, falling back to a fixed slug when nothing usable remains."""
    slug = derive_slug(text) if text else ""
    return slug or UNKNOWN_DRUG_SLUG
