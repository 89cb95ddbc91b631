"""
Base repository: the persistence boundary every lifecycle engine talks to.

One repository per table. Reads go through the SQLModel session, writes are
plain UPDATE statements on the session's connection so the caller controls
the transaction through atomic().
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional
import uuid

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from tender_service.repositories.errors import (
    RecordAlreadyExists,
    RecordNotFound,
    RecordVersionMismatch,
    StorageError,
)

PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    # sqlite reports the violation only in the message
    return "UNIQUE constraint failed" in str(exc.orig)


class BaseRepository:
    model: Any = None

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def entity(self) -> str:
        return self.model.__name__

    @contextmanager
    def atomic(self) -> Iterator[Session]:
        """
        All writes issued inside the block are committed together or rolled
        back together. Exceptions raised inside the block are re-raised as is.
        """
        try:
            yield self._session
        except BaseException:
            self._session.rollback()
            raise
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StorageError(f"{self.entity}.commit", exc) from exc

    def get(self, record_id: uuid.UUID):
        try:
            record = self._session.get(self.model, record_id, populate_existing=True)
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.entity}.get", exc) from exc
        if record is None:
            raise RecordNotFound(self.entity, record_id)
        return record

    def first(self, *criteria):
        try:
            return self._session.exec(select(self.model).where(*criteria)).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.entity}.first", exc) from exc

    def insert(self, **fields):
        record = self.model(**fields)
        try:
            with self.atomic():
                self._session.add(record)
                self._session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise RecordAlreadyExists(self.entity) from exc
            raise StorageError(f"{self.entity}.insert", exc) from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.entity}.insert", exc) from exc
        self._session.refresh(record)
        return record

    def update_field(self, record_id: uuid.UUID, column: str, value: Any) -> None:
        if column not in self.model.__table__.c:
            raise ValueError(f"{self.entity} has no column {column!r}")
        statement = (
            update(self.model)
            .where(self.model.id == record_id)
            .values({column: value})
        )
        if self._execute(statement, "update_field") == 0:
            raise RecordNotFound(self.entity, record_id)

    def increment_version(self, record_id: uuid.UUID, expected_version: Optional[int] = None) -> None:
        """
        version = version + 1. With expected_version the row only matches
        while it is still at that version.
        """
        statement = update(self.model).where(self.model.id == record_id)
        if expected_version is not None:
            statement = statement.where(self.model.version == expected_version)
        statement = statement.values(version=self.model.version + 1)

        if self._execute(statement, "increment_version") == 0:
            if expected_version is not None:
                raise RecordVersionMismatch(self.entity, record_id, expected_version)
            raise RecordNotFound(self.entity, record_id)

    def query(self, *criteria, order_by=None, limit: Optional[int] = None, offset: int = 0) -> List[Any]:
        statement = select(self.model)
        if criteria:
            statement = statement.where(*criteria)
        if order_by is not None:
            statement = statement.order_by(order_by)
        statement = statement.offset(offset).limit(limit)
        try:
            return list(self._session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.entity}.query", exc) from exc

    def _execute(self, statement, operation: str) -> int:
        try:
            result = self._session.connection().execute(statement)
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.entity}.{operation}", exc) from exc
        return result.rowcount
