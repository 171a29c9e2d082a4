"""Canonical drug record and derived FAQ models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from drug_info.helpers.sanitize import sanitize_scalar


class CanonicalDrugRecord(BaseModel):
    """Normalized drug record built from one raw label document.

    ``name`` and ``slug`` are always non-empty. Every other text field is
    either None or trimmed, non-empty text. ``route``, ``contraindications``
    and ``boxed_warning`` have no extraction source in the batch feed and stay
    None there.
    """

    name: str
    slug: str
    generic_name: str | None = None
    brand_names: list[str] = []
    fda_generic_name: str | None = None
    fda_brand_name: str | None = None
    manufacturer: str | None = None
    route: str | None = None
    indications: str | None = None
    contraindications: str | None = None
    warnings: str | None = None
    boxed_warning: str | None = None
    dosage_info: str | None = None
    adverse_reactions: str | None = None
    raw_label_data: Any = None
    published: bool = True

    @field_validator("name", "slug")
    @classmethod
    def require_text(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator(
        "generic_name",
        "fda_generic_name",
        "fda_brand_name",
        "manufacturer",
        "route",
        "indications",
        "contraindications",
        "warnings",
        "boxed_warning",
        "dosage_info",
        "adverse_reactions",
        mode="before",
    )
    @classmethod
    def empty_text_is_none(cls, value: Any) -> str | None:
        return sanitize_scalar(value)

    @field_validator("brand_names")
    @classmethod
    def drop_blank_brand_names(cls, value: list[str]) -> list[str]:
        return [name.strip() for name in value if name.strip()]

    def to_row(self) -> dict[str, Any]:
        """Column values for persisting this record."""
        return self.model_dump()


class DrugFAQ(BaseModel):
    """Question/answer pair derived from a canonical record."""

    question: str
    answer: str


class DrugResponse(CanonicalDrugRecord):
    """Stored drug as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
