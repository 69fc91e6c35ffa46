"""
Identity generator for the shared record id space.
Hospitals, patients and donors all draw from one persisted counter.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import StorageError
from ..models.counter import IdCounter

logger = logging.getLogger(__name__)

COUNTER_NAME = "records"


class IdentityGenerator:
    """Issues unique, strictly increasing ids.

    The increment is flushed into the caller's transaction, so it becomes
    durable together with the record that consumes the id. If that
    transaction rolls back, the counter rolls back with it and the id has
    never been observed by anyone.
    """

    def __init__(self, db: Session, name: str = COUNTER_NAME):
        self.db = db
        self.name = name

    def next(self) -> int:
        """Return the current counter value and advance the counter."""
        try:
            counter = self.db.get(IdCounter, self.name)
            if counter is None:
                counter = IdCounter(name=self.name, value=0)
                self.db.add(counter)
            current = counter.value or 0
            counter.value = current + 1
            self.db.flush()
        except SQLAlchemyError as exc:
            logger.error("Cannot increment ids for counter %s: %s", self.name, exc)
            raise StorageError("Cannot increment ids", cause=exc) from exc
        return current
