"""Unit tests for the SQLAlchemy-backed DrugStore."""

import pytest
from sqlalchemy.exc import IntegrityError

from drug_info.services.store import EntityKind, SqlAlchemyDrugStore


def _drug(slug: str) -> dict:
    return {"name": slug.title(), "slug": slug, "brand_names": [slug.title()]}


def test_create_returns_id_and_counts(db_session):
    store = SqlAlchemyDrugStore(db_session)

    drug_id = store.create(EntityKind.DRUG, _drug("aspirin"))
    store.create(EntityKind.DRUG_FAQ, {"drug_id": drug_id, "question": "Q?", "answer": "A."})

    assert isinstance(drug_id, str) and drug_id
    assert store.count(EntityKind.DRUG) == 1
    assert store.count(EntityKind.DRUG_FAQ) == 1


def test_delete_all(db_session):
    store = SqlAlchemyDrugStore(db_session)
    store.create(EntityKind.DRUG, _drug("aspirin"))
    store.create(EntityKind.DRUG, _drug("ibuprofen"))

    deleted = store.delete_all(EntityKind.DRUG)

    assert deleted == 2
    assert store.count(EntityKind.DRUG) == 0


def test_savepoint_rolls_back_only_failed_work(db_session):
    store = SqlAlchemyDrugStore(db_session)
    store.create(EntityKind.DRUG, _drug("aspirin"))

    with pytest.raises(IntegrityError):
        with store.savepoint():
            store.create(EntityKind.DRUG, _drug("naproxen"))
            store.create(EntityKind.DRUG, _drug("aspirin"))

    store.commit()
    assert store.count(EntityKind.DRUG) == 1


def test_rollback_discards_uncommitted_work(db_session):
    store = SqlAlchemyDrugStore(db_session)
    store.create(EntityKind.DRUG, _drug("aspirin"))
    store.commit()

    store.delete_all(EntityKind.DRUG)
    store.rollback()

    assert store.count(EntityKind.DRUG) == 1
