from fastapi import APIRouter, Depends, status
from typing import List

from ..schemas import Patient, PatientPayload, EditPatientPayload, PledgePayload
from ..services.patients import PatientService
from ..services.pledges import PledgeCoordinator
from .deps import get_patient_service, get_pledge_coordinator
from .hospitals import PledgeResponse

router = APIRouter(prefix="/patients", tags=["patients"])


@router.get("/incomplete", response_model=List[Patient])
def list_incomplete_patients(service: PatientService = Depends(get_patient_service)):
    """Patients whose needed pints have not been pledged yet."""
    return service.list_incomplete_patients()


@router.get("/{patient_id}", response_model=Patient)
def get_patient(patient_id: int, service: PatientService = Depends(get_patient_service)):
    return service.get_patient(patient_id)


@router.post("/", response_model=Patient, status_code=status.HTTP_201_CREATED)
def add_patient(payload: PatientPayload, service: PatientService = Depends(get_patient_service)):
    return service.add_patient(payload)


@router.put("/", response_model=Patient)
def edit_patient(payload: EditPatientPayload, service: PatientService = Depends(get_patient_service)):
    return service.edit_patient(payload)


@router.post("/pledge", response_model=PledgeResponse)
def pledge_to_patient(payload: PledgePayload, coordinator: PledgeCoordinator = Depends(get_pledge_coordinator)):
    """Pledge a donor to a patient; requires the patient's password."""
    return PledgeResponse(message=coordinator.pledge_to_patient(payload))
