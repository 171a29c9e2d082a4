"""Unit tests for helpers/drug_helpers."""

from drug_info.helpers.drug_helpers import derive_slug, slug_or_default


def test_derive_slug_basic():
    assert derive_slug("Lisinopril 10mg!") == "lisinopril-10mg"


def test_derive_slug_is_idempotent():
    first = derive_slug("Lisinopril 10mg!")
    assert derive_slug("Lisinopril 10mg!") == first
    assert derive_slug(first) == first


def test_derive_slug_collapses_runs_of_separators():
    assert derive_slug("Amoxicillin / Clavulanate -- Potassium") == "amoxicillin-clavulanate-potassium"


def test_derive_slug_trims_edge_hyphens():
    assert derive_slug("  (Tylenol)  ") == "tylenol"


def test_derive_slug_replaces_non_ascii():
    assert derive_slug("Ménière Relief") == "m-ni-re-relief"


def test_derive_slug_only_symbols_is_empty():
    assert derive_slug("!!!") == ""


def test_slug_or_default_uses_fallback():
    assert slug_or_default("!!!") == "unknown"
    assert slug_or_default(None) == "unknown"
    assert slug_or_default("") == "unknown"


def test_slug_or_default_passes_through_clean_slug():
    assert slug_or_default("metformin-er") == "metformin-er"
