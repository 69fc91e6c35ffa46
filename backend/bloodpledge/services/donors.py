import logging

from ..core.exceptions import NotFound
from ..core.redaction import redact
from ..core.security import get_password_hash
from ..schemas import Donor, DonorPayload, parse_payload
from .bank import BloodBank

logger = logging.getLogger(__name__)


class DonorService:
    def __init__(self, bank: BloodBank):
        self.bank = bank

    def add_donor(self, payload) -> Donor:
        payload = parse_payload(DonorPayload, payload)
        password_hash = get_password_hash(payload.password)
        with self.bank.unit_of_work() as store:
            donor = Donor(
                id=store.ids.next(),
                name=payload.name,
                blood_group=payload.blood_group,
                password=password_hash,
                beneficiaries=[],
            )
            store.donors.insert(donor)
        logger.info("Added donor %s (%s)", donor.id, donor.blood_group)
        return redact(donor)

    def get_donor(self, donor_id: int) -> Donor:
        with self.bank.unit_of_work() as store:
            donor = store.donors.find(donor_id)
        if donor is None:
            raise NotFound(f"donor id:{donor_id} does not exist")
        return redact(donor)
