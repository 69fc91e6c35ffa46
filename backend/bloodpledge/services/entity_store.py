"""
Generic persistent id -> record store.

One ``EntityStore`` exists per record kind. It translates between ORM rows
and pydantic records so nothing above this layer touches SQLAlchemy objects.
There is no delete.
"""
import logging
from typing import Generic, Iterator, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import NotFound, StorageError
from ..schemas import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

# Keys are stored in a signed 64-bit INTEGER column
MAX_STORABLE_ID = 2**63 - 1


class EntityStore(Generic[R]):
    def __init__(self, db: Session, model, record_type: Type[R], label: str):
        self.db = db
        self.model = model
        self.record_type = record_type
        self.label = label

    def _to_record(self, row) -> R:
        return self.record_type.model_validate(row)

    def find(self, record_id: int) -> Optional[R]:
        if not 0 <= record_id <= MAX_STORABLE_ID:
            return None
        row = self.db.get(self.model, record_id)
        return self._to_record(row) if row is not None else None

    def get(self, record_id: int) -> R:
        record = self.find(record_id)
        if record is None:
            raise NotFound(f"{self.label} of id: {record_id} not found")
        return record

    def scan(self) -> Iterator[Tuple[int, R]]:
        """Yield ``(id, record)`` pairs in ascending id order.

        Each call runs a fresh query, so a new scan always reflects the
        current state of the store.
        """
        for row in self.db.query(self.model).order_by(self.model.id):
            yield row.id, self._to_record(row)

    def upsert(self, record_id: int, record: R) -> Optional[R]:
        """Write ``record`` under ``record_id``.

        Returns the previously stored record, or ``None`` when this was an insert.
        """
        if record.id != record_id:
            raise StorageError(f"{self.label} record id {record.id} does not match key {record_id}")
        if not 0 <= record_id <= MAX_STORABLE_ID:
            raise StorageError(f"{self.label} id {record_id} is outside the storable range")

        try:
            row = self.db.get(self.model, record_id)
            previous = self._to_record(row) if row is not None else None
            values = record.model_dump()
            if row is None:
                self.db.add(self.model(**values))
            else:
                for key, value in values.items():
                    setattr(row, key, value)
            self.db.flush()
        except SQLAlchemyError as exc:
            logger.error("Write of %s %s failed: %s", self.label, record_id, exc)
            raise StorageError(f"Could not write {self.label} {record_id}", cause=exc) from exc
        return previous

    def insert(self, record: R) -> R:
        """Upsert that must create a new entry."""
        if self.upsert(record.id, record) is not None:
            raise StorageError(f"Could not add {self.label} name: {getattr(record, 'name', record.id)}")
        return record

    def update(self, record: R) -> R:
        """Upsert that must replace an existing entry."""
        if self.upsert(record.id, record) is None:
            raise StorageError(f"Could not update {self.label} {record.id}")
        return record
