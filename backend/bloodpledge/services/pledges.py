"""
Pledge coordinator.

A pledge links a donor to a recipient (patient or hospital) and must update
both records or neither. Both new records are computed in memory, then
written, then committed as one unit of work. A failure after the donor write
rolls the whole transaction back and surfaces as ``StorageError``.
"""
import logging

from ..core.exceptions import InvalidPayload, NotFound
from ..core.security import authorize
from ..schemas import PledgePayload, parse_payload
from .bank import BloodBank, BloodBankStore

logger = logging.getLogger(__name__)


class PledgeCoordinator:
    def __init__(self, bank: BloodBank):
        self.bank = bank

    def _load_donor(self, store: BloodBankStore, donor_id: int):
        donor = store.donors.find(donor_id)
        if donor is None:
            raise NotFound(f"Donor of id: {donor_id} not found")
        return donor

    def pledge_to_hospital(self, payload) -> str:
        payload = parse_payload(PledgePayload, payload)
        with self.bank.unit_of_work() as store:
            hospital = store.hospitals.get(payload.recipient_id)
            authorize(hospital, payload.password)
            donor = self._load_donor(store, payload.donor_id)

            # Stage both sides before touching the store
            new_donor = donor.add_beneficiary(hospital.id)
            new_hospital = hospital.add_donor(donor.id)

            store.donors.update(new_donor)
            store.hospitals.update(new_hospital)

        logger.info(
            "Donor %s pledged %s pints to hospital %s",
            donor.id, payload.pints_pledge, hospital.id,
        )
        return (
            f"Successfully pledged to hospital {hospital.name}, "
            f"visit address: {hospital.address} to donate"
        )

    def pledge_to_patient(self, payload) -> str:
        payload = parse_payload(PledgePayload, payload)
        with self.bank.unit_of_work() as store:
            patient = store.patients.get(payload.recipient_id)
            authorize(patient, payload.password)
            donor = self._load_donor(store, payload.donor_id)
            if patient.target_met:
                logger.warning("Rejected pledge to patient %s: target already met", patient.id)
                raise InvalidPayload("Patient has already reached their needed donation target")

            new_donor = donor.add_beneficiary(patient.id)
            new_patient = patient.add_pledge(donor.id, payload.pints_pledge)

            store.donors.update(new_donor)
            store.patients.update(new_patient)

        logger.info(
            "Donor %s pledged %s pints to patient %s (%s/%s)",
            donor.id, payload.pints_pledge, patient.id, new_patient.donations, new_patient.needed_pints,
        )
        return (
            f"Successfully pledged to patient {patient.name}, "
            f"visit hospital: {patient.hospital} to donate"
        )
