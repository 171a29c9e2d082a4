"""Progress reporting for seeding runs."""

import logging
from typing import Protocol

from drug_info.models.model_drug import CanonicalDrugRecord
from drug_info.models.model_seed import SeedSummary

logger = logging.getLogger("drug_info.seed")


class SeedReporter(Protocol):
    def record_success(self, index: int, record: CanonicalDrugRecord, faq_count: int) -> None: ...

    def record_failure(self, index: int, drug_name: str | None, error: Exception) -> None: ...

    def summarize(self, summary: SeedSummary) -> None: ...


class LoggingSeedReporter:
    """Reports one log line per document and the final counts."""

    def __init__(self, total: int | None = None) -> None:
        self.total = total

    def _position(self, index: int) -> str:
        return f"{index}/{self.total}" if self.total is not None else str(index)

    def record_success(self, index: int, record: CanonicalDrugRecord, faq_count: int) -> None:
        logger.info(
            "[%s] Created drug %s (slug=%s) with %d FAQs",
            self._position(index),
            record.name,
            record.slug,
            faq_count,
        )

    def record_failure(self, index: int, drug_name: str | None, error: Exception) -> None:
        logger.error(
            "[%s] Error creating drug %s: %s",
            self._position(index),
            drug_name or "<unnamed>",
            error,
        )

    def summarize(self, summary: SeedSummary) -> None:
        logger.info(
            "Seeding completed: %d documents, %d drugs, %d FAQs, %d failed",
            summary.documents_total,
            summary.drugs_stored,
            summary.faqs_stored,
            summary.failed,
        )
