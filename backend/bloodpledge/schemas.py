"""
Records and request payloads.

Records are the values held in the entity stores. They are immutable in
practice: every mutation goes through one of the explicit update methods,
which name exactly the fields the operation is allowed to change.
"""
from typing import Any, List, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import InvalidPayload

# Pint counts are unsigned 32-bit quantities
MAX_PINTS = 2**32 - 1


class Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    password: str


class Hospital(Record):
    name: str
    address: str
    city: str
    donations: int = 0
    donors_ids: List[int] = Field(default_factory=list)

    def renamed(self, name: str) -> "Hospital":
        return self.model_copy(update={"name": name})

    def add_donor(self, donor_id: int) -> "Hospital":
        # Hospital pint totals are maintained out-of-band; only the link changes
        return self.model_copy(update={"donors_ids": [*self.donors_ids, donor_id]})


class Patient(Record):
    name: str
    blood_group: str
    hospital: str
    description: str
    needed_pints: int
    donations: int = 0
    is_complete: bool = False
    donors_ids: List[int] = Field(default_factory=list)

    @property
    def target_met(self) -> bool:
        return self.donations >= self.needed_pints

    def with_needed_pints(self, needed_pints: int) -> "Patient":
        return self.model_copy(update={
            "needed_pints": needed_pints,
            "is_complete": self.donations >= needed_pints,
        })

    def add_pledge(self, donor_id: int, pints: int) -> "Patient":
        donations = self.donations + pints
        return self.model_copy(update={
            "donors_ids": [*self.donors_ids, donor_id],
            "donations": donations,
            "is_complete": donations >= self.needed_pints,
        })


class Donor(Record):
    name: str
    blood_group: str
    beneficiaries: List[int] = Field(default_factory=list)

    def add_beneficiary(self, recipient_id: int) -> "Donor":
        return self.model_copy(update={"beneficiaries": [*self.beneficiaries, recipient_id]})


# ── Request payloads ────────────────────────────────────────────────────────

class HospitalPayload(BaseModel):
    name: str = Field(min_length=3)
    address: str = Field(min_length=3)
    password: str
    city: str


class EditHospitalPayload(BaseModel):
    hospital_id: int = Field(ge=0)
    name: str = Field(min_length=3)
    password: str


class PatientPayload(BaseModel):
    name: str = Field(min_length=3)
    blood_group: str
    description: str = Field(min_length=6)
    password: str
    hospital: str
    needed_pints: int = Field(ge=0, le=MAX_PINTS)


class EditPatientPayload(BaseModel):
    patient_id: int = Field(ge=0)
    needed_pints: int = Field(ge=0, le=MAX_PINTS)
    password: str
    is_complete: bool


class DonorPayload(BaseModel):
    name: str = Field(min_length=3)
    blood_group: str
    password: str


class PledgePayload(BaseModel):
    donor_id: int = Field(ge=0)
    recipient_id: int = Field(ge=0)
    pints_pledge: int = Field(ge=0, le=MAX_PINTS)
    password: str


P = TypeVar("P", bound=BaseModel)


def parse_payload(model: Type[P], data: Union[P, dict, Any]) -> P:
    """Validate ``data`` against ``model``, raising ``InvalidPayload`` on failure."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidPayload(str(exc)) from exc
