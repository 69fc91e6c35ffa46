import logging
from typing import List

from ..core.exceptions import NotFound
from ..core.redaction import redact, redact_all
from ..core.security import authorize, get_password_hash
from ..schemas import EditPatientPayload, Patient, PatientPayload, parse_payload
from .bank import BloodBank

logger = logging.getLogger(__name__)


class PatientService:
    def __init__(self, bank: BloodBank):
        self.bank = bank

    def get_patient(self, patient_id: int) -> Patient:
        with self.bank.unit_of_work() as store:
            patient = store.patients.find(patient_id)
        if patient is None:
            raise NotFound(f"patient id:{patient_id} does not exist")
        return redact(patient)

    def list_incomplete_patients(self) -> List[Patient]:
        """Patients still collecting pledges."""
        with self.bank.unit_of_work() as store:
            patients = [patient for _, patient in store.patients.scan() if not patient.is_complete]
        if not patients:
            raise NotFound("No patients for donations could be found")
        return redact_all(patients)

    def add_patient(self, payload) -> Patient:
        payload = parse_payload(PatientPayload, payload)
        password_hash = get_password_hash(payload.password)
        with self.bank.unit_of_work() as store:
            patient = Patient(
                id=store.ids.next(),
                name=payload.name,
                blood_group=payload.blood_group,
                hospital=payload.hospital,
                description=payload.description,
                needed_pints=payload.needed_pints,
                donations=0,
                is_complete=payload.needed_pints <= 0,
                password=password_hash,
                donors_ids=[],
            )
            store.patients.insert(patient)
        logger.info("Added patient %s needing %s pints at %s", patient.id, patient.needed_pints, patient.hospital)
        return redact(patient)

    def edit_patient(self, payload) -> Patient:
        """Change a patient's needed pints.

        Completion is always recomputed from donations and the new target;
        the supplied ``is_complete`` flag cannot override it.
        """
        payload = parse_payload(EditPatientPayload, payload)
        with self.bank.unit_of_work() as store:
            patient = store.patients.get(payload.patient_id)
            authorize(patient, payload.password)
            updated = store.patients.update(patient.with_needed_pints(payload.needed_pints))
        if payload.is_complete != updated.is_complete:
            logger.warning(
                "Ignored is_complete=%s for patient %s; %s of %s pints donated",
                payload.is_complete, updated.id, updated.donations, updated.needed_pints,
            )
        logger.info("Updated patient %s to need %s pints", updated.id, updated.needed_pints)
        return redact(updated)
