"""
Canonicalization of FDA label payloads received over the API.

Unlike the batch feed, API payloads use the openFDA-style snake_case label
layout (``generic_name``, ``indications.indications_and_usage`` ...). The
payload is sanitized with the value sanitizers, its sections are flattened
to text and the result is written onto an existing drug.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from drug_info.constants import LABEL_SECTION_FIELDS
from drug_info.helpers.sanitize import (
    sanitize_object,
    sanitize_scalar,
    sanitize_string_list,
)
from drug_info.helpers.text import extract_text, join_sections
from drug_info.models.model_fda_label import FDALabelPayload, LabelSections
from drug_info.services.validation import PayloadValidationError
from drug_info.sqlalchemy.drugs import Drug

logger = logging.getLogger(__name__)


class DrugNotFoundError(Exception):
    """Raised when a label is posted for a drug that does not exist (HTTP 404)."""

    status_code = 404

    def __init__(self, drug_id: str):
        self.drug_id = drug_id
        super().__init__(f"Drug with ID {drug_id} not found")


def clean_fda_label(label: Any) -> FDALabelPayload | None:
    """Sanitize an FDA label payload.

    Returns None when the payload is not a mapping or nothing usable
    survives sanitization. ``raw_data`` is not counted as usable content.
    """
    if not isinstance(label, Mapping):
        return None

    cleaned = FDALabelPayload(
        generic_name=sanitize_scalar(label.get("generic_name")),
        brand_name=sanitize_scalar(label.get("brand_name")),
        brand_name_suffix=sanitize_string_list(label.get("brand_name_suffix")),
        manufacturer=sanitize_scalar(label.get("manufacturer")),
        route=sanitize_scalar(label.get("route")),
        **{field: sanitize_object(label.get(field)) for field in LABEL_SECTION_FIELDS},
        raw_data=label.get("raw_data") or dict(label),
    )

    if not cleaned.model_dump(exclude={"raw_data"}, exclude_none=True):
        return None
    return cleaned


def _nested(section: dict[str, Any] | None, key: str) -> Any:
    return section.get(key) if section else None


def parse_label_sections(label: FDALabelPayload) -> LabelSections:
    """Flatten the section mappings of a cleaned label into text."""
    return LabelSections(
        indications=extract_text(
            _nested(label.indications, "indications_and_usage") or label.indications
        ),
        contraindications=extract_text(
            _nested(label.contraindications, "contraindications") or label.contraindications
        ),
        warnings=join_sections(
            extract_text(_nested(label.warnings, "warnings")),
            extract_text(_nested(label.warnings, "warnings_and_precautions")),
        ),
        boxed_warning=extract_text(_nested(label.warnings, "boxed_warning")),
        dosage_info=join_sections(
            extract_text(_nested(label.dosage, "dosage_and_administration")),
            extract_text(_nested(label.dosage, "dosage_forms_and_strengths")),
        ),
        adverse_reactions=extract_text(
            _nested(label.adverse_reactions, "adverse_reactions") or label.adverse_reactions
        ),
    )


def process_fda_label(session: Session, drug_id: str, label: Any) -> Drug:
    """Apply a posted FDA label to an existing drug and commit."""
    drug = session.get(Drug, drug_id)
    if drug is None:
        raise DrugNotFoundError(drug_id)

    cleaned = clean_fda_label(label)
    if cleaned is None:
        logger.warning("No valid FDA label data provided for drug %s", drug_id)
        raise PayloadValidationError("No valid FDA label data provided")

    sections = parse_label_sections(cleaned)

    try:
        drug.raw_label_data = cleaned.raw_data
        drug.fda_generic_name = cleaned.generic_name
        drug.fda_brand_name = cleaned.brand_name
        drug.manufacturer = cleaned.manufacturer
        drug.route = cleaned.route
        for field, value in sections.model_dump().items():
            setattr(drug, field, value)

        logger.info(
            "Processing FDA label for drug %s (indications=%s, warnings=%s, contraindications=%s)",
            drug_id,
            sections.indications is not None,
            sections.warnings is not None,
            sections.contraindications is not None,
        )
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error processing FDA label for drug %s", drug_id)
        raise PayloadValidationError("Failed to process FDA label data") from e

    session.refresh(drug)
    return drug
