"""
Demo data seeder for BloodPledge.

Creates a demo hospital, a patient still collecting pledges and a donor, so
the pledge walkthrough works immediately after a fresh start.

Credentials (printed to stdout on first run):
  Hospital: City General  / Hospital1234!
  Patient : Jane Demo     / Patient1234!
  Donor   : Alex Demo     / Donor1234!

This seeder is idempotent — it is safe to call on every startup.
"""
from .services.bank import BloodBank
from .services.donors import DonorService
from .services.hospitals import HospitalService
from .services.patients import PatientService

DEMO_HOSPITAL_NAME = "City General"
DEMO_HOSPITAL_PASSWORD = "Hospital1234!"

DEMO_PATIENT_NAME = "Jane Demo"
DEMO_PATIENT_PASSWORD = "Patient1234!"

DEMO_DONOR_NAME = "Alex Demo"
DEMO_DONOR_PASSWORD = "Donor1234!"


def seed_demo_data(bank: BloodBank) -> None:
    """Create the demo hospital, patient and donor if they do not already exist."""
    bank.create_tables()
    _seed_hospital(bank)
    _seed_patient(bank)
    _seed_donor(bank)


# ── helpers ──────────────────────────────────────────────────────────────────

def _exists(bank: BloodBank, kind: str, name: str) -> bool:
    with bank.unit_of_work() as store:
        return any(record.name == name for _, record in getattr(store, kind).scan())


def _seed_hospital(bank: BloodBank) -> None:
    if not _exists(bank, "hospitals", DEMO_HOSPITAL_NAME):
        hospital = HospitalService(bank).add_hospital({
            "name": DEMO_HOSPITAL_NAME,
            "address": "1 Main St",
            "city": "Metro",
            "password": DEMO_HOSPITAL_PASSWORD,
        })
        print(f"[seed] Created demo hospital: {hospital.name} (id: {hospital.id}) / {DEMO_HOSPITAL_PASSWORD}")


def _seed_patient(bank: BloodBank) -> None:
    if not _exists(bank, "patients", DEMO_PATIENT_NAME):
        patient = PatientService(bank).add_patient({
            "name": DEMO_PATIENT_NAME,
            "blood_group": "A+",
            "hospital": DEMO_HOSPITAL_NAME,
            "description": "Pre-seeded demo patient awaiting surgery.",
            "needed_pints": 4,
            "password": DEMO_PATIENT_PASSWORD,
        })
        print(f"[seed] Created demo patient : {patient.name} (id: {patient.id}) / {DEMO_PATIENT_PASSWORD}")


def _seed_donor(bank: BloodBank) -> None:
    if not _exists(bank, "donors", DEMO_DONOR_NAME):
        donor = DonorService(bank).add_donor({
            "name": DEMO_DONOR_NAME,
            "blood_group": "O+",
            "password": DEMO_DONOR_PASSWORD,
        })
        print(f"[seed] Created demo donor   : {donor.name} (id: {donor.id}) / {DEMO_DONOR_PASSWORD}")
