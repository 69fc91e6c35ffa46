from fastapi import Depends, Request

from ..services.bank import BloodBank
from ..services.donors import DonorService
from ..services.hospitals import HospitalService
from ..services.patients import PatientService
from ..services.pledges import PledgeCoordinator


def get_bank(request: Request) -> BloodBank:
    return request.app.state.bank


def get_hospital_service(bank: BloodBank = Depends(get_bank)) -> HospitalService:
    return HospitalService(bank)


def get_patient_service(bank: BloodBank = Depends(get_bank)) -> PatientService:
    return PatientService(bank)


def get_donor_service(bank: BloodBank = Depends(get_bank)) -> DonorService:
    return DonorService(bank)


def get_pledge_coordinator(bank: BloodBank = Depends(get_bank)) -> PledgeCoordinator:
    return PledgeCoordinator(bank)
