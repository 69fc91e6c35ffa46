import os

# Must be set before bloodpledge is imported: settings and the hash context read them at import
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bloodpledge.services.bank import BloodBank
from bloodpledge.services.donors import DonorService
from bloodpledge.services.hospitals import HospitalService
from bloodpledge.services.patients import PatientService
from bloodpledge.services.pledges import PledgeCoordinator


@pytest.fixture()
def engine():
    """Isolated in-memory SQLite database shared by every session in a test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def bank(engine):
    TestSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    test_bank = BloodBank(session_factory=TestSession)
    test_bank.create_tables()
    return test_bank


@pytest.fixture()
def hospitals(bank):
    return HospitalService(bank)


@pytest.fixture()
def patients(bank):
    return PatientService(bank)


@pytest.fixture()
def donors(bank):
    return DonorService(bank)


@pytest.fixture()
def pledges(bank):
    return PledgeCoordinator(bank)


@pytest.fixture()
def stored(bank):
    """Read the unredacted record straight from the store."""
    def _read(kind, record_id):
        with bank.unit_of_work() as store:
            return getattr(store, kind).get(record_id)
    return _read
