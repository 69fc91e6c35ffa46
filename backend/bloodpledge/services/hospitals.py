import logging
from typing import List

from ..core.exceptions import NotFound
from ..core.redaction import redact, redact_all
from ..core.security import authorize, get_password_hash
from ..schemas import EditHospitalPayload, Hospital, HospitalPayload, parse_payload
from .bank import BloodBank

logger = logging.getLogger(__name__)


class HospitalService:
    def __init__(self, bank: BloodBank):
        self.bank = bank

    def list_hospitals(self) -> List[Hospital]:
        with self.bank.unit_of_work() as store:
            hospitals = [hospital for _, hospital in store.hospitals.scan()]
        if not hospitals:
            raise NotFound("no hospitals found")
        return redact_all(hospitals)

    def search_hospitals(self, search: str) -> List[Hospital]:
        """Hospitals whose city or name contains ``search``, ignoring case."""
        query = search.lower()
        with self.bank.unit_of_work() as store:
            matches = [
                hospital for _, hospital in store.hospitals.scan()
                if query in hospital.city.lower() or query in hospital.name.lower()
            ]
        if not matches:
            raise NotFound(f"no hospitals for city or name: {query} could be found")
        return redact_all(matches)

    def get_hospital(self, hospital_id: int) -> Hospital:
        with self.bank.unit_of_work() as store:
            hospital = store.hospitals.get(hospital_id)
        return redact(hospital)

    def add_hospital(self, payload) -> Hospital:
        payload = parse_payload(HospitalPayload, payload)
        password_hash = get_password_hash(payload.password)
        with self.bank.unit_of_work() as store:
            hospital = Hospital(
                id=store.ids.next(),
                name=payload.name,
                address=payload.address,
                city=payload.city,
                password=password_hash,
                donations=0,
                donors_ids=[],
            )
            store.hospitals.insert(hospital)
        logger.info("Added hospital %s (%s)", hospital.id, hospital.name)
        return redact(hospital)

    def edit_hospital(self, payload) -> Hospital:
        """Rename a hospital. Only the name changes."""
        payload = parse_payload(EditHospitalPayload, payload)
        with self.bank.unit_of_work() as store:
            hospital = store.hospitals.get(payload.hospital_id)
            authorize(hospital, payload.password)
            updated = store.hospitals.update(hospital.renamed(payload.name))
        logger.info("Renamed hospital %s to %s", updated.id, updated.name)
        return redact(updated)
