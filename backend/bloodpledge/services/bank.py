"""
Blood bank unit of work.

``BloodBank`` owns the session factory for the persistent stores. Every
operation runs inside ``unit_of_work()``, which serializes it against all
other operations, commits on success and rolls back on any failure. Multi
record updates are therefore all-or-nothing.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.exceptions import StorageError
from ..models.base import Base, SessionLocal
from ..models.donor import DonorRow
from ..models.hospital import HospitalRow
from ..models.patient import PatientRow
from ..schemas import Donor, Hospital, Patient
from .entity_store import EntityStore
from .identity import IdentityGenerator

logger = logging.getLogger(__name__)


class BloodBankStore:
    """The id counter and the three entity stores bound to one session."""

    def __init__(self, db: Session):
        self.db = db
        self.ids = IdentityGenerator(db)
        self.hospitals: EntityStore[Hospital] = EntityStore(db, HospitalRow, Hospital, "hospital")
        self.patients: EntityStore[Patient] = EntityStore(db, PatientRow, Patient, "patient")
        self.donors: EntityStore[Donor] = EntityStore(db, DonorRow, Donor, "donor")


class BloodBank:
    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory or SessionLocal
        self._lock = threading.Lock()

    def create_tables(self) -> None:
        bind = self.session_factory.kw["bind"]
        Base.metadata.create_all(bind=bind)

    @contextmanager
    def unit_of_work(self) -> Iterator[BloodBankStore]:
        with self._lock:
            db = self.session_factory()
            try:
                yield BloodBankStore(db)
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.error("Commit failed, unit of work rolled back: %s", exc)
                raise StorageError("Could not commit changes", cause=exc) from exc
            except StorageError:
                db.rollback()
                logger.error("Storage fault, unit of work rolled back")
                raise
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()
