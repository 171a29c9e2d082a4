"""Project-wide constants."""

# -- Defaults ---------------------------------------------------------------
DEFAULT_DATABASE_URL: str = "sqlite:///drug_info.db"
DEFAULT_LABELS_FILE: str = "Labels.json"

# -- Canonical record -------------------------------------------------------
UNKNOWN_DRUG_NAME: str = "Unknown Drug"
UNKNOWN_DRUG_SLUG: str = "unknown"

# Raw label document keys (batch feed)
RAW_DRUG_NAME_KEY: str = "drugName"
RAW_SLUG_KEY: str = "slug"
RAW_LABELER_KEY: str = "labeler"
RAW_LABEL_KEY: str = "label"

# Keys inside the nested "label" block
LABEL_GENERIC_NAME_KEY: str = "genericName"
LABEL_LABELER_NAME_KEY: str = "labelerName"
LABEL_SECTION_KEYS: dict[str, str] = {
    "indications": "indicationsAndUsage",
    "warnings": "warningsAndPrecautions",
    "dosage_info": "dosageAndAdministration",
    "adverse_reactions": "adverseReactions",
}

# -- Text extraction --------------------------------------------------------
SECTION_JOINER: str = ". "

# -- FAQ derivation ---------------------------------------------------------
FAQ_ANSWER_MAX_CHARS: int = 500
FAQ_CONTINUATION_MARKER: str = "..."

# -- Boundary validation ----------------------------------------------------
# Top-level label fields that must be strings when present.
LABEL_STRING_FIELDS: tuple[str, ...] = ("generic_name", "brand_name", "manufacturer")
LABEL_LIST_FIELDS: tuple[str, ...] = ("brand_name_suffix",)

# Section mappings carried by an inbound FDA label payload.
LABEL_SECTION_FIELDS: tuple[str, ...] = (
    "indications",
    "contraindications",
    "warnings",
    "dosage",
    "adverse_reactions",
)
