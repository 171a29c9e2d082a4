"""Models for FDA label payloads received over the API."""

from typing import Any

from pydantic import BaseModel


class FDALabelPayload(BaseModel):
    """Sanitized FDA label as produced by clean_fda_label.

    Section fields hold already-sanitized mappings (see sanitize_object);
    their inner shape varies by vendor so they are kept untyped.
    """

    generic_name: str | None = None
    brand_name: str | None = None
    brand_name_suffix: list[str] | None = None
    manufacturer: str | None = None
    route: str | None = None
    indications: dict[str, Any] | None = None
    contraindications: dict[str, Any] | None = None
    warnings: dict[str, Any] | None = None
    dosage: dict[str, Any] | None = None
    adverse_reactions: dict[str, Any] | None = None
    raw_data: Any = None


class LabelSections(BaseModel):
    """Section texts extracted from a sanitized FDA label."""

    indications: str | None = None
    contraindications: str | None = None
    warnings: str | None = None
    boxed_warning: str | None = None
    dosage_info: str | None = None
    adverse_reactions: str | None = None
