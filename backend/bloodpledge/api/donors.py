from fastapi import APIRouter, Depends, status

from ..schemas import Donor, DonorPayload
from ..services.donors import DonorService
from .deps import get_donor_service

router = APIRouter(prefix="/donors", tags=["donors"])


@router.post("/", response_model=Donor, status_code=status.HTTP_201_CREATED)
def add_donor(payload: DonorPayload, service: DonorService = Depends(get_donor_service)):
    return service.add_donor(payload)


@router.get("/{donor_id}", response_model=Donor)
def get_donor(donor_id: int, service: DonorService = Depends(get_donor_service)):
    return service.get_donor(donor_id)
