"""
Batch seeding of the drug store from an FDA labels file.

The run has replace-all semantics: existing FAQs and drugs are deleted, then
every document is canonicalized and stored with its derived FAQs. The whole
run is one transaction. Each document gets its own savepoint, so a document
that fails is rolled back and reported while the rest of the batch carries
on. Anything that fails outside a document (reading the file, clearing the
tables, committing) aborts the run and rolls everything back.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from drug_info.constants import FAQ_ANSWER_MAX_CHARS, RAW_DRUG_NAME_KEY
from drug_info.db.session import init_db, session_scope
from drug_info.helpers.sanitize import sanitize_scalar
from drug_info.models.model_drug import CanonicalDrugRecord
from drug_info.models.model_seed import SeedFailure, SeedSummary
from drug_info.runners.reporting import LoggingSeedReporter, SeedReporter
from drug_info.services.canonicalizer import canonicalize
from drug_info.services.faq import derive_faqs
from drug_info.services.store import DrugStore, EntityKind, SqlAlchemyDrugStore

logger = logging.getLogger(__name__)


class LabelFileError(Exception):
    """Raised when the labels file cannot be read or parsed. Fatal for a run."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def load_label_documents(path: Path) -> list[Any]:
    """Read the whole labels file; it must hold a JSON array."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LabelFileError(path, f"cannot read labels file ({e})") from e

    try:
        documents = json.loads(text)
    except json.JSONDecodeError as e:
        raise LabelFileError(path, f"invalid JSON ({e})") from e

    if not isinstance(documents, list):
        raise LabelFileError(path, "expected a JSON array of label documents")

    logger.info("Found %d drugs to process in %s", len(documents), path)
    return documents


def _document_name(raw: Any) -> str | None:
    if isinstance(raw, Mapping):
        return sanitize_scalar(raw.get(RAW_DRUG_NAME_KEY))
    return None


def _seed_document(
    raw: Any, store: DrugStore, faq_answer_max_chars: int
) -> tuple[CanonicalDrugRecord, int]:
    record = canonicalize(raw)
    drug_id = store.create(EntityKind.DRUG, record.to_row())
    faqs = derive_faqs(record, max_chars=faq_answer_max_chars)
    for faq in faqs:
        store.create(EntityKind.DRUG_FAQ, {**faq.model_dump(), "drug_id": drug_id})
    return record, len(faqs)


def seed(
    raw_documents: Sequence[Any],
    store: DrugStore,
    reporter: SeedReporter | None = None,
    faq_answer_max_chars: int = FAQ_ANSWER_MAX_CHARS,
) -> SeedSummary:
    """Replace the store's contents with *raw_documents*.

    Returns a summary whose counts are read back from the store.
    """
    reporter = reporter or LoggingSeedReporter(total=len(raw_documents))
    failures: list[SeedFailure] = []

    try:
        logger.info("Clearing existing data")
        store.delete_all(EntityKind.DRUG_FAQ)
        store.delete_all(EntityKind.DRUG)

        for index, raw in enumerate(raw_documents, start=1):
            try:
                with store.savepoint():
                    record, faq_count = _seed_document(raw, store, faq_answer_max_chars)
            except Exception as e:
                drug_name = _document_name(raw)
                failures.append(SeedFailure(index=index, drug_name=drug_name, error=str(e)))
                reporter.record_failure(index, drug_name, e)
                continue
            reporter.record_success(index, record, faq_count)

        store.commit()
    except Exception:
        logger.exception("Seeding aborted, rolling back")
        store.rollback()
        raise

    summary = SeedSummary(
        documents_total=len(raw_documents),
        drugs_stored=store.count(EntityKind.DRUG),
        faqs_stored=store.count(EntityKind.DRUG_FAQ),
        failures=failures,
    )
    reporter.summarize(summary)
    return summary


def run_seed(
    labels_path: Path,
    database_url: str | None = None,
    faq_answer_max_chars: int = FAQ_ANSWER_MAX_CHARS,
) -> SeedSummary:
    """Load *labels_path* and seed the database at *database_url*."""
    documents = load_label_documents(labels_path)
    init_db(database_url)
    with session_scope(database_url) as session:
        return seed(
            documents,
            SqlAlchemyDrugStore(session),
            faq_answer_max_chars=faq_answer_max_chars,
        )
