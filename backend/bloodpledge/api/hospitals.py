from fastapi import APIRouter, Depends, status
from typing import List
from pydantic import BaseModel

from ..schemas import Hospital, HospitalPayload, EditHospitalPayload, PledgePayload
from ..services.hospitals import HospitalService
from ..services.pledges import PledgeCoordinator
from .deps import get_hospital_service, get_pledge_coordinator

router = APIRouter(prefix="/hospitals", tags=["hospitals"])


class PledgeResponse(BaseModel):
    message: str


@router.get("/", response_model=List[Hospital])
def list_hospitals(service: HospitalService = Depends(get_hospital_service)):
    return service.list_hospitals()


@router.get("/search", response_model=List[Hospital])
def search_hospitals(q: str, service: HospitalService = Depends(get_hospital_service)):
    """Search hospitals by city or name."""
    return service.search_hospitals(q)


@router.get("/{hospital_id}", response_model=Hospital)
def get_hospital(hospital_id: int, service: HospitalService = Depends(get_hospital_service)):
    return service.get_hospital(hospital_id)


@router.post("/", response_model=Hospital, status_code=status.HTTP_201_CREATED)
def add_hospital(payload: HospitalPayload, service: HospitalService = Depends(get_hospital_service)):
    return service.add_hospital(payload)


@router.put("/", response_model=Hospital)
def edit_hospital(payload: EditHospitalPayload, service: HospitalService = Depends(get_hospital_service)):
    """Rename a hospital; requires the hospital's password."""
    return service.edit_hospital(payload)


@router.post("/pledge", response_model=PledgeResponse)
def pledge_to_hospital(payload: PledgePayload, coordinator: PledgeCoordinator = Depends(get_pledge_coordinator)):
    """Pledge a donor to a hospital; requires the hospital's password."""
    return PledgeResponse(message=coordinator.pledge_to_hospital(payload))
