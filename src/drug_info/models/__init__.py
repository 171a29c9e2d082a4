"""Data models for drug-info."""

from drug_info.models.model_drug import CanonicalDrugRecord, DrugFAQ, DrugResponse
from drug_info.models.model_fda_label import FDALabelPayload, LabelSections
from drug_info.models.model_seed import SeedFailure, SeedSummary

__all__ = [
    "CanonicalDrugRecord",
    "DrugFAQ",
    "DrugResponse",
    "FDALabelPayload",
    "LabelSections",
    "SeedFailure",
    "SeedSummary",
]
