"""
Label canonicalizer for the batch feed.

Maps one raw label document (as found in Labels.json) onto a
CanonicalDrugRecord. The mapping is total: missing or wrongly typed fields
degrade to None or to defaults, never to an exception.

Raw document shape (all keys optional)::

    {
        "drugName": "Lisinopril",
        "slug": "lisinopril",
        "labeler": "Acme Pharma",
        "label": {
            "genericName": "lisinopril",
            "labelerName": "Acme Pharma Inc.",
            "indicationsAndUsage": "<p>...</p>",
            "warningsAndPrecautions": "...",
            "dosageAndAdministration": {"text": "..."},
            "adverseReactions": {"items": ["...", "..."]}
        }
    }
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from drug_info.constants import (
    LABEL_GENERIC_NAME_KEY,
    LABEL_LABELER_NAME_KEY,
    LABEL_SECTION_KEYS,
    RAW_DRUG_NAME_KEY,
    RAW_LABEL_KEY,
    RAW_LABELER_KEY,
    RAW_SLUG_KEY,
    UNKNOWN_DRUG_NAME,
)
from drug_info.helpers.drug_helpers import slug_or_default
from drug_info.helpers.sanitize import sanitize_scalar
from drug_info.helpers.text import extract_text, strip_html
from drug_info.models.model_drug import CanonicalDrugRecord

logger = logging.getLogger(__name__)


def section_text(section: Any) -> str | None:
    """Extract a section and strip its markup; empty results are None."""
    return sanitize_scalar(strip_html(extract_text(section)))


def canonicalize(raw: Any) -> CanonicalDrugRecord:
    """Build the canonical record for one raw label document."""
    document: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    label = document.get(RAW_LABEL_KEY)
    if not isinstance(label, Mapping):
        label = {}

    drug_name = sanitize_scalar(document.get(RAW_DRUG_NAME_KEY))
    name = drug_name or UNKNOWN_DRUG_NAME
    generic_name = sanitize_scalar(label.get(LABEL_GENERIC_NAME_KEY))
    upstream_slug = sanitize_scalar(document.get(RAW_SLUG_KEY))

    sections = {
        field: section_text(label.get(key)) for field, key in LABEL_SECTION_KEYS.items()
    }

    record = CanonicalDrugRecord(
        name=name,
        slug=slug_or_default(upstream_slug or drug_name),
        generic_name=generic_name,
        brand_names=[drug_name] if drug_name else [],
        fda_generic_name=generic_name,
        fda_brand_name=drug_name,
        manufacturer=(
            sanitize_scalar(document.get(RAW_LABELER_KEY))
            or sanitize_scalar(label.get(LABEL_LABELER_NAME_KEY))
        ),
        route=None,
        contraindications=None,
        boxed_warning=None,
        raw_label_data=copy.deepcopy(raw),
        published=True,
        **sections,
    )
    logger.debug(
        "Canonicalized %s (slug=%s, sections=%s)",
        record.name,
        record.slug,
        [field for field, text in sections.items() if text],
    )
    return record
