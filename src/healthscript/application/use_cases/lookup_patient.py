"""Patient lookup by UHID or Aadhaar."""

from ...core.constants import AADHAAR_LENGTH
from ...domain.entities.patient import Patient
from ...domain.errors import InvalidPatientDataError, PatientNotFoundError
from ...domain.value_objects.uhid import Uhid
from ..ports.repositories.patient_repo import PatientRepository


class LookupPatientUseCase:
    def __init__(self, patient_repository: PatientRepository):
        self._patient_repository = patient_repository

    async def by_uhid(self, uhid: str) -> Patient:
        value = Uhid((uhid or "").strip()).value
        patient = await self._patient_repository.find_by_uhid(value)
        if not patient:
            raise PatientNotFoundError(value)
        return patient

    async def by_aadhaar(self, aadhaar: str) -> Patient:
        aadhaar = (aadhaar or "").strip()
        if len(aadhaar) != AADHAAR_LENGTH or not aadhaar.isdigit():
            raise InvalidPatientDataError(
                "aadhaar", "Aadhaar number must be exactly 12 digits", aadhaar
            )
        patient = await self._patient_repository.find_by_aadhaar(aadhaar)
        if not patient:
            raise PatientNotFoundError(aadhaar, field="aadhaar")
        return patient
