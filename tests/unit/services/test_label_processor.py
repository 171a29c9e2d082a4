"""Unit tests for services/label_processor."""

import pytest
from sqlalchemy.exc import OperationalError

from drug_info.models.model_fda_label import FDALabelPayload
from drug_info.services.label_processor import (
    DrugNotFoundError,
    clean_fda_label,
    parse_label_sections,
    process_fda_label,
)
from drug_info.services.validation import PayloadValidationError
from drug_info.sqlalchemy.drugs import Drug


@pytest.fixture
def fda_label() -> dict:
    """openFDA-style label payload as posted to the API."""
    return {
        "generic_name": "  metformin hydrochloride ",
        "brand_name": "Glucophage",
        "brand_name_suffix": "XR",
        "manufacturer": "Acme Pharma",
        "route": "ORAL",
        "indications": {"indications_and_usage": {"text": "Type 2 diabetes mellitus."}},
        "contraindications": {"contraindications": {"items": ["Severe renal impairment", ""]}},
        "warnings": {
            "warnings": {"text": "Lactic acidosis."},
            "warnings_and_precautions": {"items": ["Hypoglycemia", "Vitamin B12 deficiency"]},
            "boxed_warning": {"text": "WARNING: LACTIC ACIDOSIS"},
        },
        "dosage": {
            "dosage_and_administration": {"text": "500 mg twice daily"},
            "dosage_forms_and_strengths": "Tablets: 500 mg, 850 mg",
        },
        "adverse_reactions": {"adverse_reactions": {"items": ["Diarrhea", "Nausea"]}},
    }


# --- clean_fda_label ---


def test_clean_fda_label_sanitizes_fields(fda_label):
    cleaned = clean_fda_label(fda_label)

    assert cleaned.generic_name == "metformin hydrochloride"
    assert cleaned.brand_name == "Glucophage"
    assert cleaned.brand_name_suffix == ["XR"]
    assert cleaned.route == "ORAL"
    assert cleaned.contraindications == {
        "contraindications": {"items": ["Severe renal impairment"]}
    }


def test_clean_fda_label_raw_data_defaults_to_label(fda_label):
    cleaned = clean_fda_label(fda_label)

    assert cleaned.raw_data == fda_label


def test_clean_fda_label_prefers_explicit_raw_data(fda_label):
    fda_label["raw_data"] = {"set_id": "abc-123"}

    assert clean_fda_label(fda_label).raw_data == {"set_id": "abc-123"}


@pytest.mark.parametrize(
    "label",
    [None, "label", ["generic_name"], {}, {"generic_name": "  ", "warnings": {"text": ""}}],
)
def test_clean_fda_label_without_usable_data_is_none(label):
    assert clean_fda_label(label) is None


def test_clean_fda_label_raw_data_alone_is_not_usable():
    assert clean_fda_label({"raw_data": {"set_id": "abc"}}) is None


# --- parse_label_sections ---


def test_parse_label_sections(fda_label):
    sections = parse_label_sections(clean_fda_label(fda_label))

    assert sections.indications == "Type 2 diabetes mellitus."
    assert sections.contraindications == "Severe renal impairment"
    assert sections.warnings == "Lactic acidosis.. Hypoglycemia. Vitamin B12 deficiency"
    assert sections.boxed_warning == "WARNING: LACTIC ACIDOSIS"
    assert sections.dosage_info == "500 mg twice daily. Tablets: 500 mg, 850 mg"
    assert sections.adverse_reactions == "Diarrhea. Nausea"


def test_parse_label_sections_unnested_sections():
    label = FDALabelPayload(
        indications={"text": "Hypertension"},
        contraindications={"text": "Hypersensitivity"},
        adverse_reactions={"items": ["Rash"]},
    )

    sections = parse_label_sections(label)

    assert sections.indications == "Hypertension"
    assert sections.contraindications == "Hypersensitivity"
    assert sections.adverse_reactions == "Rash"


def test_parse_label_sections_nested_indications():
    label = FDALabelPayload(
        indications={"indications_and_usage": {"items": ["Hypertension", "Heart failure"]}}
    )

    assert parse_label_sections(label).indications == "Hypertension. Heart failure"


def test_parse_label_sections_missing_sections_are_none():
    sections = parse_label_sections(FDALabelPayload(generic_name="metformin"))

    assert sections.model_dump() == {
        "indications": None,
        "contraindications": None,
        "warnings": None,
        "boxed_warning": None,
        "dosage_info": None,
        "adverse_reactions": None,
    }


# --- process_fda_label ---


@pytest.fixture
def stored_drug(db_session) -> Drug:
    drug = Drug(name="Metformin", slug="metformin", brand_names=["Metformin"])
    db_session.add(drug)
    db_session.commit()
    return drug


def test_process_fda_label_updates_drug(db_session, stored_drug, fda_label):
    drug = process_fda_label(db_session, stored_drug.id, fda_label)

    assert drug.id == stored_drug.id
    assert drug.fda_generic_name == "metformin hydrochloride"
    assert drug.fda_brand_name == "Glucophage"
    assert drug.manufacturer == "Acme Pharma"
    assert drug.route == "ORAL"
    assert drug.boxed_warning == "WARNING: LACTIC ACIDOSIS"
    assert drug.dosage_info == "500 mg twice daily. Tablets: 500 mg, 850 mg"
    assert drug.raw_label_data["brand_name"] == "Glucophage"


def test_process_fda_label_unknown_drug(db_session, fda_label):
    with pytest.raises(DrugNotFoundError) as exc_info:
        process_fda_label(db_session, "missing-id", fda_label)

    assert exc_info.value.status_code == 404


def test_process_fda_label_empty_label_is_client_error(db_session, stored_drug):
    with pytest.raises(PayloadValidationError, match="No valid FDA label data provided"):
        process_fda_label(db_session, stored_drug.id, {"generic_name": ""})


def test_process_fda_label_commit_failure_is_client_error(
    db_session, stored_drug, fda_label, monkeypatch
):
    def failing_commit():
        raise OperationalError("UPDATE drugs", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(PayloadValidationError, match="Failed to process FDA label data"):
        process_fda_label(db_session, stored_drug.id, fda_label)

    monkeypatch.undo()
    db_session.expire_all()
    assert db_session.get(Drug, stored_drug.id).fda_generic_name is None
