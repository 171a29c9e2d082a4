"""Seeding run result models."""

from pydantic import BaseModel


class SeedFailure(BaseModel):
    """One document that could not be seeded."""

    index: int
    drug_name: str | None = None
    error: str


class SeedSummary(BaseModel):
    """Outcome of a seeding run.

    ``drugs_stored`` and ``faqs_stored`` are counted from the store after the
    run commits, not from the loop, so they reflect what actually persisted.
    """

    documents_total: int = 0
    drugs_stored: int = 0
    faqs_stored: int = 0
    failures: list[SeedFailure] = []

    @property
    def failed(self) -> int:
        return len(self.failures)
