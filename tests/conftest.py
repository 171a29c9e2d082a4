"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy.orm import Session

import drug_info.sqlalchemy.drugs  # noqa: F401  registers the tables
from drug_info.db.base import Base
from drug_info.db.session import make_engine


@pytest.fixture
def sample_raw_document() -> dict:
    """Raw label document as found in Labels.json."""
    return {
        "drugName": "Lisinopril",
        "slug": "lisinopril",
        "labeler": "Acme Pharma",
        "label": {
            "genericName": "lisinopril",
            "labelerName": "Acme Pharma Inc.",
            "indicationsAndUsage": "<h2>1 INDICATIONS</h2><p>Lisinopril is indicated for "
            "the treatment of <b>hypertension</b>.</p>",
            "warningsAndPrecautions": "<p>Angioedema may occur.</p>",
            "dosageAndAdministration": {"text": "<p>Initial dose: 10 mg once daily.</p>"},
            "adverseReactions": {"items": ["Headache", " ", "Dizziness"]},
        },
    }


@pytest.fixture
def db_session():
    """Session on a fresh in-memory SQLite database with the drug tables."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = Session(engine)
    yield session
    session.close()
    engine.dispose()
