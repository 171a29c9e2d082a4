"""
Persistence interface consumed by the seed runner.

The runner only needs bulk delete, create, count and transaction control, so
it talks to a small DrugStore protocol. SqlAlchemyDrugStore is the adapter
used in production; tests may substitute anything with the same methods.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from enum import Enum
from typing import Any, Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from drug_info.sqlalchemy.drugs import Drug, DrugFAQ

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    DRUG = "drug"
    DRUG_FAQ = "drug_faq"


class DrugStore(Protocol):
    def delete_all(self, kind: EntityKind) -> int: ...

    def create(self, kind: EntityKind, fields: dict[str, Any]) -> str: ...

    def count(self, kind: EntityKind) -> int: ...

    def savepoint(self) -> AbstractContextManager[None]: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


_MODELS: dict[EntityKind, type[Drug] | type[DrugFAQ]] = {
    EntityKind.DRUG: Drug,
    EntityKind.DRUG_FAQ: DrugFAQ,
}


class SqlAlchemyDrugStore:
    """DrugStore backed by a SQLAlchemy session.

    Nothing is committed until commit() is called, so a whole seeding run is
    one transaction. savepoint() scopes a nested transaction that is rolled
    back on any exception, leaving earlier work in the session intact.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def delete_all(self, kind: EntityKind) -> int:
        result = self._session.execute(delete(_MODELS[kind]))
        logger.info("Deleted %d %s rows", result.rowcount, kind.value)
        return result.rowcount

    def create(self, kind: EntityKind, fields: dict[str, Any]) -> str:
        row = _MODELS[kind](**fields)
        self._session.add(row)
        self._session.flush()
        return row.id

    def count(self, kind: EntityKind) -> int:
        return self._session.scalar(select(func.count()).select_from(_MODELS[kind]))

    @contextmanager
    def savepoint(self) -> Iterator[None]:
        with self._session.begin_nested():
            yield

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
