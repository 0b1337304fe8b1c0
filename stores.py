"""Common plumbing for the record stores.

Every mutating store call is its own unit of work: it either commits or rolls
back before returning. Failures never raise; they come back as a
:class:`StoreResult` carrying a :class:`FailureKind`. A result is truthy only
on success, so ``if store.delete(5): ...`` reads the same as a boolean API.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class StoreResult:
    ok: bool
    value: Any = None
    error: Optional[FailureKind] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = None) -> "StoreResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: FailureKind, message: str) -> "StoreResult":
        return cls(ok=False, error=kind, message=message)


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


class BaseStore:
    """CRUD over one mapped model.

    Subclasses set ``model`` and ``label`` and expose typed ``create`` /
    ``update`` methods that validate their arguments and then call
    :meth:`_add` / :meth:`_update`.
    """

    model = None
    label = "record"

    def __init__(self, session):
        self.session = session

    # ---- reads ----
    def get(self, record_id: int):
        try:
            return self.session.get(self.model, record_id)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while loading %s %s", self.label, record_id)
            return None

    def fetch(self, record_id: int) -> StoreResult:
        """Like get(), but tells a missing row (NOT_FOUND) from a storage error."""
        record, failure = self._load(record_id)
        return failure or StoreResult.success(record)

    def list_all(self) -> list:
        """All rows in insertion order, fully loaded."""
        try:
            return self.session.query(self.model).order_by(self.model.id).all()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while listing %s rows", self.label)
            return []

    # ---- writes ----
    def delete(self, record_id: int) -> StoreResult:
        record, failure = self._load(record_id)
        if failure is not None:
            return failure
        self.session.delete(record)
        result = self._commit(record_id)
        if result:
            logger.info("Deleted %s %s", self.label, record_id)
        return result

    def _add(self, record) -> StoreResult:
        self.session.add(record)
        result = self._commit(record)
        if result:
            logger.info("Created %s %s", self.label, record.id)
        return result

    def _update(self, record_id: int, values: dict) -> StoreResult:
        record, failure = self._load(record_id)
        if failure is not None:
            return failure
        for field, value in values.items():
            setattr(record, field, value)
        result = self._commit(record)
        if result:
            logger.info("Updated %s %s", self.label, record_id)
        return result

    def _load(self, record_id: int):
        try:
            record = self.session.get(self.model, record_id)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while loading %s %s", self.label, record_id)
            return None, StoreResult.failure(FailureKind.IO_ERROR, "Storage unavailable")
        if record is None:
            return None, StoreResult.failure(
                FailureKind.NOT_FOUND, f"{self.label.capitalize()} {record_id} not found"
            )
        return record, None

    def _commit(self, value=None) -> StoreResult:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("%s rejected by a constraint: %s", self.label.capitalize(), exc.orig)
            return StoreResult.failure(
                FailureKind.DUPLICATE_KEY, f"{self.label.capitalize()} already exists"
            )
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Storage error while saving %s", self.label)
            return StoreResult.failure(FailureKind.IO_ERROR, "Storage unavailable")
        return StoreResult.success(value)

    def _invalid(self, message: str) -> StoreResult:
        logger.warning("Rejected %s: %s", self.label, message)
        return StoreResult.failure(FailureKind.INVALID, message)
